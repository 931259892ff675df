"""Process entry point: bind the listen socket and run uvicorn on it."""

import logging
import socket

import uvicorn

from greeter.config import Settings, get_settings
from greeter.main import configure_logging, create_app

logger = logging.getLogger(__name__)


class BindError(RuntimeError):
    """The listen socket could not be bound."""


def bind_socket(host: str, port: int) -> socket.socket:
    """Bind a TCP socket on host:port. No retry, no fallback port."""
    if not 1 <= port <= 65535:
        raise BindError(f"Cannot listen on {host}:{port}: port must be between 1 and 65535")

    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
    try:
        sock.bind((host, port))
    except OSError as e:
        sock.close()
        raise BindError(f"Cannot listen on {host}:{port}: {e.strerror or e}") from e
    return sock


def build_server(settings: Settings, app=None) -> uvicorn.Server:
    config = uvicorn.Config(
        app if app is not None else create_app(settings),
        log_level=settings.log_level.lower(),
        timeout_graceful_shutdown=settings.shutdown_timeout,
    )
    return uvicorn.Server(config)


def serve(settings: Settings):
    """Serve until the process receives a termination signal.

    uvicorn drains in-flight requests on SIGTERM/SIGINT before returning.
    """
    sock = bind_socket(settings.host, settings.port)
    logger.info(f"Listening on {settings.host}:{settings.port}")
    server = build_server(settings)
    try:
        server.run(sockets=[sock])
    finally:
        sock.close()


def main() -> int:
    settings = get_settings()
    configure_logging(settings.log_level)
    try:
        serve(settings)
    except BindError as e:
        logger.error(str(e))
        return 1
    return 0
