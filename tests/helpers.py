"""HTTP doubles shared by the client-side tests."""
import json
from urllib.parse import urlsplit

import requests


def http_response(status_code=200, body=b"", content_type="text/plain; charset=utf-8"):
    """Build a real requests.Response without touching the network."""
    r = requests.Response()
    r.status_code = status_code
    r._content = body.encode("utf-8") if isinstance(body, str) else body
    r.encoding = "utf-8"
    r.headers["Content-Type"] = content_type
    return r


def json_response(payload, status_code=200):
    return http_response(status_code, json.dumps(payload), "application/json")


def sent_dtos(call):
    """DTO list carried by a mocked Session.request call (multipart or JSON)."""
    kwargs = call.kwargs
    if "files" in kwargs:
        name, (_, data, _) = kwargs["files"][0]
        assert name == "data"
        return json.loads(data)
    return json.loads(kwargs["data"].decode("utf-8"))


class DjangoClientSession:
    """Replays prepared `requests` calls against the Django test client."""

    def __init__(self, client):
        self.client = client
        self.prepared = []

    def request(self, method, url, headers=None, timeout=None, params=None, **kwargs):
        prepared = requests.Request(method, url, headers=headers, params=params, **kwargs).prepare()
        self.prepared.append(prepared)
        parts = urlsplit(prepared.url)
        path = parts.path + (f"?{parts.query}" if parts.query else "")
        extra = {}
        if "Authorization" in prepared.headers:
            extra["HTTP_AUTHORIZATION"] = prepared.headers["Authorization"]
        resp = self.client.generic(
            method,
            path,
            data=prepared.body or b"",
            content_type=prepared.headers.get("Content-Type", ""),
            **extra,
        )
        return http_response(resp.status_code, resp.content, resp.get("Content-Type", ""))
