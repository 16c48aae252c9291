import json
import logging
import sys

import couchparrot.wrapper_class as couchDB
from couchparrot.config import RequestOptions
from couchparrot.wrapper_class import CouchTransportError, FatalError

LOGGER = logging.getLogger(__name__)

DESIGN_PREFIX = "_design"


def eprint(*args, **kwargs):
    print(*args, file=sys.stderr, **kwargs)


def call(config, uri, method="get", data=None):
    '''Returns (error, response). Exactly one of them is None.'''
    options = RequestOptions.for_config(config, uri, method, data)
    try:
        return None, couchDB.send(options)
    except CouchTransportError as e:
        return e, None


def failure(error, response):
    '''(status, reason) of a failed call'''
    if error is not None:
        return "-", str(error)
    return response.status_code, couchDB.error_reason(response)


def replication_doc(config):
    return {
        "_id": config.id,
        "source": config.source,
        "target": config.target,
        "continuous": config.continuous,
        "create_target": config.create_target,
        "user_ctx": {"name": "admin", "roles": ["_admin"]},
    }


def list_replications(config):
    '''Print every replication document of the _replicator database'''
    uri = couchDB.replicator_uri(config, "_all_docs", include_docs="true")
    error, r = call(config, uri)
    if error or r.status_code != 200:
        status, reason = failure(error, r)
        eprint(f"Error getting replications: {status}; {reason}")
        return None

    result = r.json()
    if result.get("total_rows", 0) <= 0:
        print("No replications found.")
        return []

    # total_rows counts the _design document
    print(str(result["total_rows"] - 1) + " replications found.\n\nID                  Replication ID      State          ")
    docs = [row["doc"] for row in result.get("rows", []) if not row["id"].startswith(DESIGN_PREFIX)]
    for doc in docs:
        text = doc["_id"] + " | "
        if doc.get("_replication_id"):
            text += doc["_replication_id"] + " | "
            text += str(doc.get("_replication_state"))
        print(text)
    return docs


def add_replication(config):
    if not config.source or not config.target or not config.id:
        raise FatalError("id, source and target options are required.")

    doc = replication_doc(config)
    LOGGER.debug(f"Replication doc : {doc}")
    error, r = call(config, couchDB.replicator_uri(config, config.id), "put", doc)
    if error or r.status_code != 201:
        status, reason = failure(error, r)
        eprint(f"Error adding replication: status {status}; {reason}")
        return None

    body = couchDB.decodeBody(r)
    print(f"Replication {config.id} added: {json.dumps(body)}")
    return body


def remove_replication(config):
    '''Fetch the replication document then delete it with the fetched revision.
    The delete is never sent if the fetch fails.
    '''
    if not config.id:
        raise FatalError("The id option is required")

    uri = couchDB.replicator_uri(config, config.id)
    error, r = call(config, uri)
    if error or r.status_code != 200:
        status, reason = failure(error, r)
        raise FatalError(f"Error retrieving replication: status {status}; {reason}")

    doc = r.json()
    LOGGER.debug(f"Deleting {config.id} at revision {doc['_rev']}")
    error, r = call(config, couchDB.replicator_uri(config, config.id, rev=doc["_rev"]), "delete")
    if error or r.status_code != 200:
        status, reason = failure(error, r)
        eprint(f"Error removing replication: status {status}; {reason}")
        return None

    print(f"Replication {config.id} deleted.  Final state: {json.dumps(doc)}")
    return doc


def replication_status(config):
    if not config.id:
        raise FatalError("The id option is required.")

    error, r = call(config, couchDB.replicator_uri(config, config.id))
    if error or r.status_code != 200:
        status, reason = failure(error, r)
        eprint(f"Error getting replication: {status}; {reason}")
        return None

    doc = r.json()
    print(f"Replication {doc['_id']} has status {doc.get('_replication_state')} as of {doc.get('_replication_state_time')}")
    return doc
