"""Helpers for running the service on real sockets."""

import socket
import threading
import time
from contextlib import contextmanager

from greeter.server import bind_socket, build_server


def free_port() -> int:
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
        s.bind(("127.0.0.1", 0))
        return s.getsockname()[1]


@contextmanager
def running_server(settings, app=None, timeout=10.0):
    """Run a real uvicorn server in a background thread until the block exits."""
    server = build_server(settings, app)
    sock = bind_socket(settings.host, settings.port)
    thread = threading.Thread(target=server.run, kwargs={"sockets": [sock]}, daemon=True)
    thread.start()

    deadline = time.monotonic() + timeout
    while not server.started:
        if not thread.is_alive() or time.monotonic() > deadline:
            raise RuntimeError("server did not start")
        time.sleep(0.01)

    try:
        yield server
    finally:
        server.should_exit = True
        thread.join(timeout)
        sock.close()
