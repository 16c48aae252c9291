import base64
import logging
from urllib.parse import quote, urlencode

import requests


class CouchWrapperError(Exception):
    pass


class CouchTransportError(CouchWrapperError):
    '''The request never got an HTTP answer (refused connection, DNS failure...)'''
    def __init__(self, uri, cause):
        self.uri = uri
        self.cause = cause
        super().__init__(f"{cause}")


class FatalError(CouchWrapperError):
    pass


LOGGER = logging.getLogger(__name__)

SESSION = requests.session()
SESSION.trust_env = False


def basicAuthorization(username, password):
    token = f"{username}:{password or ''}".encode()
    return "Basic " + base64.b64encode(token).decode()


def send(options):
    '''options : config.RequestOptions
    Returns the requests.Response whatever its status code.
    Raises CouchTransportError when no response was received.
    '''
    method = options.method.upper()
    headers = {}
    kwargs = {}
    if options.data is not None:
        kwargs["json"] = options.data
    if options.username:
        headers["Authorization"] = basicAuthorization(options.username, options.password)

    LOGGER.debug(f"{method} {options.uri}")
    try:
        r = SESSION.request(method, options.uri, headers=headers, **kwargs)
    except requests.RequestException as e:
        LOGGER.debug(f"{method} {options.uri} failed : {e}")
        raise CouchTransportError(options.uri, e) from e

    LOGGER.debug(f"{method} {options.uri} -> {r.status_code}")
    return r


def replicator_uri(config, doc_id=None, **params):
    '''Build <base>/_replicator[/<doc_id>][?params]'''
    uri = config.replicator_url
    if doc_id is not None:
        uri += "/" + quote(str(doc_id), safe="")
    if params:
        uri += "?" + urlencode(params, quote_via=quote, safe="")
    return uri


def decodeBody(response):
    '''JSON content of a response, None if it cannot be decoded'''
    try:
        return response.json()
    except ValueError:
        return None


def error_reason(response):
    '''Reason of a CouchDB error answer, "unknown" when the body says nothing usable'''
    data = decodeBody(response)
    if isinstance(data, dict):
        for key in ("reason", "error"):
            if data.get(key):
                return str(data[key])
    return "unknown"

