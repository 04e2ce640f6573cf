import logging
import socket
from typing import Optional

import uvicorn
from fastapi import FastAPI

from serverinfo.api.routers import info
from serverinfo.config.settings import Config
from serverinfo.hwosinfo.collector import HostInfoCollector
from serverinfo.version import get_version

logger = logging.getLogger(__name__)


class BindError(Exception):
    """Raised when the listening socket cannot be opened."""


def create_app(collector: Optional[HostInfoCollector] = None) -> FastAPI:
    app = FastAPI(
        title="Server Info",
        description="Reports the hostname, OS and primary IPv4 address of the host.",
        version=get_version(),
        # Only the info routes are exposed
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.collector = collector or HostInfoCollector()
    app.include_router(info.router)
    return app


def bind_socket(host: str, port: str) -> socket.socket:
    """Bind a TCP socket on host:port, raising BindError on failure."""
    try:
        port_number = int(port)
    except ValueError:
        raise BindError(f"Invalid port {port!r}")

    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
    try:
        sock.bind((host, port_number))
    except (OSError, OverflowError) as e:
        sock.close()
        raise BindError(f"Failed to bind {host}:{port}: {e}") from e

    sock.set_inheritable(True)
    return sock


def serve(settings: Config, app: Optional[FastAPI] = None):
    """Bind the configured address and serve until interrupted."""
    sock = bind_socket(settings.host, settings.port)
    logger.info(f"Server listening on {settings.host}:{settings.port}")

    server = uvicorn.Server(uvicorn.Config(
        app or create_app(),
        log_level=settings.log_level.lower(),
    ))
    try:
        server.run(sockets=[sock])
    finally:
        sock.close()
