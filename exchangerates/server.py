"""Running the HTTP API with a graceful shutdown on interrupt."""

from __future__ import annotations

import logging
import signal
import threading

from werkzeug.serving import BaseWSGIServer, make_server

from .api import create_app
from .config import ServerConfig
from .queries import Application

logger = logging.getLogger(__name__)


def make_http_server(config: ServerConfig, application: Application) -> BaseWSGIServer:
    """Create a threaded WSGI server bound to the configured address."""
    return make_server(
        config.addr, config.port, create_app(application), threaded=True
    )


def run_http_with_graceful_shutdown(
    config: ServerConfig, application: Application
) -> threading.Event:
    """Serve until SIGINT arrives, then shut down and return a set event.

    Must be called from the main thread, where signal handlers can be installed.
    """
    done = threading.Event()
    server = make_http_server(config, application)

    def _shutdown() -> None:
        try:
            server.shutdown()
        except Exception as exc:
            logger.error("HTTP server Shutdown: %s", exc)
        logger.info("HTTP graceful shutdown")
        done.set()

    def _on_interrupt(signum, frame) -> None:
        threading.Thread(target=_shutdown, daemon=True).start()

    previous = signal.signal(signal.SIGINT, _on_interrupt)
    try:
        server.serve_forever()
    finally:
        signal.signal(signal.SIGINT, previous)
        server.server_close()
    return done