"""
Utilities for testing against a fake HTTP transport.
"""

import io
import json

import requests
from requests.adapters import BaseAdapter

from ..connection import Connection


AUTH_URL = "https://identity.api.example.com/v2.0"
TOKEN = "abc123token"

COMPUTE_URL = "https://dfw.servers.api.example.com/v2/123456"
COMPUTE_ORD_URL = "https://ord.servers.api.example.com/v2/123456"
VOLUME_URL = "https://dfw.blockstorage.api.example.com/v1/123456"
VOLUME_PRIVATE_URL = "https://snet-dfw.blockstorage.api.example.com/v1/123456"
STORAGE_URL = "https://storage101.dfw1.example.com/v1/MossoCloudFS_123"
STORAGE_PRIVATE_URL = "https://snet-storage101.dfw1.example.com/v1/MossoCloudFS_123"
DNS_URL = "https://dns.api.example.com/v1.0/123456"

#: An Identity v2 service catalog
CATALOG = [
    {
        "name": "cloudServersOpenStack",
        "type": "compute",
        "endpoints": [
            # The compute service has no private URL
            {"region": "DFW", "tenantId": "123456", "publicURL": COMPUTE_URL},
            {"region": "ORD", "tenantId": "123456", "publicURL": COMPUTE_ORD_URL + "/"},
        ],
    },
    {
        "name": "cloudBlockStorage",
        "type": "volume",
        "endpoints": [
            {
                "region": "DFW",
                "tenantId": "123456",
                "publicURL": VOLUME_URL,
                "internalURL": VOLUME_PRIVATE_URL,
            },
        ],
    },
    {
        "name": "cloudFiles",
        "type": "object-store",
        "endpoints": [
            {
                "region": "DFW",
                "tenantId": "MossoCloudFS_123",
                "publicURL": STORAGE_URL,
                "internalURL": STORAGE_PRIVATE_URL,
            },
        ],
    },
    {
        "name": "cloudDNS",
        "type": "rax:dns",
        # A global endpoint has no region
        "endpoints": [{"tenantId": "123456", "publicURL": DNS_URL}],
    },
]


def make_response(status_code = 200, body = None, url = None, text = None):
    """
    Returns a response with the given status code and JSON body.
    """
    response = requests.Response()
    response.status_code = status_code
    response.reason = "OK" if status_code < 400 else "Error"
    response.url = url
    if text is not None:
        content = text.encode()
        response.headers["Content-Type"] = "text/plain"
    elif body is not None:
        content = json.dumps(body).encode()
        response.headers["Content-Type"] = "application/json"
    else:
        content = b""
    response.raw = io.BytesIO(content)
    response.encoding = "utf-8"
    return response


class FakeAdapter(BaseAdapter):
    """
    Transport adapter that returns registered responses instead of making requests.

    Unregistered URLs give a 404.
    """

    def __init__(self):
        super().__init__()
        self.routes = {}
        self.requests = []

    def register(self, method, url, body = None, status_code = 200, exc = None):
        self.routes[(method, url)] = (status_code, body, exc)

    def get(self, url, body = None, status_code = 200, exc = None):
        self.register("GET", url, body, status_code, exc)

    def send(self, request, **kwargs):
        self.requests.append(request)
        status_code, body, exc = self.routes.get(
            (request.method, request.url),
            (404, {"itemNotFound": {"message": "Not found", "code": 404}}, None)
        )
        if exc is not None:
            raise exc
        # String bodies are sent as text rather than JSON
        if isinstance(body, str):
            response = make_response(status_code, url = request.url, text = body)
        else:
            response = make_response(status_code, body, request.url)
        response.request = request
        return response

    def close(self):
        pass

    @property
    def urls(self):
        return [request.url for request in self.requests]


def make_connection(catalog = CATALOG, **kwargs):
    """
    Returns a connection using a fake adapter, and the adapter.
    """
    kwargs.setdefault("token", TOKEN)
    connection = Connection(AUTH_URL, catalog = catalog, **kwargs)
    adapter = FakeAdapter()
    connection.session.mount("https://", adapter)
    connection.session.mount("http://", adapter)
    return connection, adapter
