import json
from unittest.mock import MagicMock

import pytest

import couchparrot.wrapper_class as couchDB
from couchparrot.config import Configuration


def make_response(status_code, body=None, text=None):
    r = MagicMock()
    r.status_code = status_code
    if text is None:
        text = json.dumps(body) if body is not None else ""
    r.text = text

    def _json():
        return json.loads(text)
    r.json.side_effect = _json
    return r


@pytest.fixture
def session(monkeypatch):
    '''Replace the module session, queue answers in session.request.side_effect'''
    mock = MagicMock()
    monkeypatch.setattr(couchDB, "SESSION", mock)
    return mock


@pytest.fixture
def config():
    return Configuration(id="rep1", source="db_a", target="db_b")
