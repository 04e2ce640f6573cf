import socket

import pytest

from serverinfo.api import server
from serverinfo.api.server import BindError, bind_socket
from serverinfo.config.settings import Config


def test_bind_socket_binds_requested_port():
    sock = bind_socket("127.0.0.1", "0")
    try:
        host, port = sock.getsockname()
        assert host == "127.0.0.1"
        assert port > 0
    finally:
        sock.close()


def test_bind_socket_port_in_use():
    taken = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    taken.bind(("127.0.0.1", 0))
    taken.listen()
    try:
        port = taken.getsockname()[1]
        with pytest.raises(BindError):
            bind_socket("127.0.0.1", str(port))
    finally:
        taken.close()


@pytest.mark.parametrize("port", ["http", "8o8o", "70000"])
def test_bind_socket_invalid_port(port):
    with pytest.raises(BindError):
        bind_socket("127.0.0.1", port)


class FakeServer:
    instances = []

    def __init__(self, config):
        self.config = config
        self.sockets = None
        FakeServer.instances.append(self)

    def run(self, sockets=None):
        self.sockets = sockets


@pytest.fixture
def fake_uvicorn(monkeypatch):
    bound = []

    class FakeSocket:
        def close(self):
            pass

    def fake_bind(host, port):
        bound.append((host, port))
        return FakeSocket()

    FakeServer.instances = []
    monkeypatch.setattr(server, "bind_socket", fake_bind)
    monkeypatch.setattr(server.uvicorn, "Server", FakeServer)
    return bound


def test_serve_uses_port_from_environment(monkeypatch, fake_uvicorn):
    monkeypatch.setenv("PORT", "9090")

    server.serve(Config())

    assert fake_uvicorn == [("0.0.0.0", "9090")]
    assert len(FakeServer.instances[0].sockets) == 1


def test_serve_defaults_to_8080(monkeypatch, fake_uvicorn):
    monkeypatch.delenv("PORT", raising=False)

    server.serve(Config())

    assert fake_uvicorn == [("0.0.0.0", "8080")]


def test_serve_bind_failure_does_not_start_server(monkeypatch):
    def failing_bind(host, port):
        raise BindError("address in use")

    FakeServer.instances = []
    monkeypatch.setattr(server, "bind_socket", failing_bind)
    monkeypatch.setattr(server.uvicorn, "Server", FakeServer)

    with pytest.raises(BindError):
        server.serve(Config())

    assert FakeServer.instances == []
