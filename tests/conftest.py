# -*- coding: utf-8 -*-
"""
Shared fixtures for storefront tests.

HTTP traffic is faked at the requests.Session level: a Mock session whose
request() returns real requests.Response objects or raises requests
exceptions. Time-budget tests run against slow_server, a real local socket
server that stalls or trickles its reply.
"""

import json
import os
import socketserver
import tempfile
import threading
import time
from unittest.mock import Mock

# Must be set before app.config is imported
os.environ.setdefault("STOREFRONT_LOG_DIR", tempfile.mkdtemp(prefix="storefront-logs-"))
os.environ.setdefault("STOREFRONT_LANGUAGE", "en")

import pytest
import requests

BASE_URL = "http://api.test/v1/api"


def make_response(status_code=200, body=None, url=BASE_URL):
    """Build a requests.Response carrying a JSON body."""
    response = requests.Response()
    response.status_code = status_code
    response.url = url
    if body is None:
        response._content = b""
    elif isinstance(body, (bytes, str)):
        response._content = body.encode("utf-8") if isinstance(body, str) else body
    else:
        response._content = json.dumps(body).encode("utf-8")
    response.encoding = "utf-8"
    # Already read: iter_content replays _content instead of touching raw
    response._content_consumed = True
    return response


@pytest.fixture(autouse=True)
def english():
    """Run every test with English messages."""
    from services.translation_manager import set_language
    set_language("en")
    yield
    set_language("en")


@pytest.fixture
def session():
    """Fake requests.Session; set .request.return_value / .side_effect per test."""
    fake = Mock(spec=requests.Session)
    fake.request.return_value = make_response(200, {"status": 200, "data": None})
    return fake


@pytest.fixture
def http_call(session):
    from services.http_transport import BoundedHttpCall
    return BoundedHttpCall(BASE_URL, timeout=15, session=session)


@pytest.fixture
def gateway(http_call):
    from services.quote_gateway import QuoteSubmissionGateway
    return QuoteSubmissionGateway(http_call)


@pytest.fixture
def sofa_item():
    from models.quote import QuoteItem
    return QuoteItem(product_id="prod-1", product_name="Aria Three-Seater Sofa", quantity=2)


def fill_valid_draft(controller):
    """Enter valid answers for steps 1-3 through the controller."""
    controller.update_field("contact", "name", "Asha Rao")
    controller.update_field("contact", "email", "asha@example.com")
    controller.update_field("contact", "phone", "9876543210")
    controller.update_field("address", "street", "12 MG Road")
    controller.update_field("address", "city", "Bengaluru")
    controller.update_field("address", "state", "Karnataka")
    controller.update_field("address", "zipCode", "560001")
    controller.update_field("project_details", "description", "Furnish a two-bedroom flat")


def http_reply(status_line, body):
    """Raw HTTP/1.1 reply bytes with a JSON body."""
    payload = json.dumps(body).encode("utf-8")
    head = (
        f"HTTP/1.1 {status_line}\r\n"
        "Content-Type: application/json\r\n"
        f"Content-Length: {len(payload)}\r\n"
        "Connection: close\r\n\r\n"
    ).encode("ascii")
    return head + payload


class _SlowReplyHandler(socketserver.BaseRequestHandler):
    """Reads the request, waits, then sends the reply one byte at a time."""

    def handle(self):
        server = self.server
        self.request.recv(65536)
        if server.stopped.wait(server.stall):
            return
        try:
            for byte in server.reply:
                self.request.sendall(bytes([byte]))
                if server.stopped.wait(server.byte_delay):
                    return
        except OSError:
            # Client gave up and closed the connection
            return


@pytest.fixture
def slow_server():
    """
    Factory for a real local HTTP server with a slow reply.

    Usage:
        url = slow_server(reply, byte_delay=0.05)  # trickles the reply
        url = slow_server(reply, stall=5)          # silent for 5 s first
    """
    servers = []

    def start(reply, byte_delay=0.0, stall=0.0):
        server = socketserver.ThreadingTCPServer(("127.0.0.1", 0), _SlowReplyHandler)
        server.daemon_threads = True
        server.reply = reply
        server.byte_delay = byte_delay
        server.stall = stall
        server.stopped = threading.Event()
        threading.Thread(target=server.serve_forever, daemon=True).start()
        servers.append(server)
        host, port = server.server_address
        return f"http://{host}:{port}/v1/api"

    yield start

    for server in servers:
        server.stopped.set()
        server.shutdown()
        server.server_close()


class Stopwatch:
    """Measures wall-clock time of a block."""

    def __enter__(self):
        self.started = time.monotonic()
        return self

    def __exit__(self, *exc):
        self.elapsed = time.monotonic() - self.started
        return False
