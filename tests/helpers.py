"""
Test helpers: fake transport built on real requests.Response objects,
so JSON decoding behaves exactly like in production.
"""

from __future__ import annotations

import json
from typing import Any
from unittest import mock

import requests


def make_response(body: Any, status_code: int = 200) -> requests.Response:
    """
    Build a requests.Response. Non-str/bytes bodies are JSON-encoded.
    """
    resp = requests.Response()
    resp.status_code = status_code
    if isinstance(body, bytes):
        raw = body
    elif isinstance(body, str):
        raw = body.encode("utf-8")
    else:
        raw = json.dumps(body).encode("utf-8")
    resp._content = raw
    resp.encoding = "utf-8"
    return resp


def fake_session(body: Any = None, status_code: int = 200) -> mock.Mock:
    """
    Mock session whose get() always returns the given body (default: []).
    """
    if body is None:
        body = []
    session = mock.Mock(spec=requests.Session)
    session.get.return_value = make_response(body, status_code)
    return session


def sent_params(session: mock.Mock) -> list[tuple[str, str]]:
    """
    Return the query parameters passed to the last session.get() call.
    """
    return list(session.get.call_args.kwargs["params"])


def sent_url(session: mock.Mock) -> str:
    return session.get.call_args.args[0]
