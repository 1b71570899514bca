"""HTTP server exposing the SysView dashboard."""

from __future__ import annotations

import json
import logging
import threading
from functools import partial
from http import HTTPStatus
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from typing import Any, ClassVar
from urllib.parse import urlsplit

from sysview.core.config import APP_NAME, ServerConfig

from .aggregator import SnapshotAggregator
from .presenters import render_dashboard, render_json

logger = logging.getLogger(__name__)

HTML_CONTENT_TYPE = "text/html; charset=utf-8"
JSON_CONTENT_TYPE = "application/json; charset=utf-8"
NOT_FOUND_BODY = {"error": "Route not found"}
INTERNAL_ERROR_BODY = {"error": "Internal server error"}


class SysViewRequestHandler(BaseHTTPRequestHandler):
    """Routes every request on its path alone; the method is not consulted."""

    server_version: ClassVar[str] = "SysView/1.0"

    def __init__(self, *args: Any, aggregator: SnapshotAggregator, **kwargs: Any) -> None:
        self._aggregator = aggregator
        super().__init__(*args, **kwargs)

    def do_GET(self) -> None:  # noqa: N802
        self._dispatch()

    def do_HEAD(self) -> None:  # noqa: N802
        self._dispatch(include_body=False)

    def __getattr__(self, name: str) -> Any:
        # handle_one_request looks up do_<METHOD>; unknown methods route like GET
        if name.startswith("do_"):
            return self._dispatch
        raise AttributeError(f"{type(self).__name__!r} object has no attribute {name!r}")

    def log_message(self, format: str, *args: Any) -> None:  # noqa: A003 - parity with BaseHTTPRequestHandler
        logger.debug("%s - %s", self.address_string(), format % args)

    def _dispatch(self, include_body: bool = True) -> None:
        path = urlsplit(self.path).path
        try:
            if path == "/":
                self._send_index(include_body)
            elif path == "/api":
                self._send_api(include_body)
            else:
                self._send_json(NOT_FOUND_BODY, HTTPStatus.NOT_FOUND, include_body)
        except Exception as exc:
            logger.exception("Error handling %s %s", self.command, self.path, exc_info=exc)
            self._send_json(INTERNAL_ERROR_BODY, HTTPStatus.INTERNAL_SERVER_ERROR, include_body)

    def _send_index(self, include_body: bool) -> None:
        snapshot, geolocation = self._aggregator.build_snapshot()
        body = render_dashboard(snapshot, geolocation).encode("utf-8")
        self._send(body, HTML_CONTENT_TYPE, HTTPStatus.OK, include_body)

    def _send_api(self, include_body: bool) -> None:
        snapshot, _ = self._aggregator.build_snapshot(embed_geolocation=True)
        body = render_json(snapshot).encode("utf-8")
        self._send(body, JSON_CONTENT_TYPE, HTTPStatus.OK, include_body)

    def _send_json(self, payload: Any, status: HTTPStatus, include_body: bool = True) -> None:
        body = json.dumps(payload).encode("utf-8")
        self._send(body, JSON_CONTENT_TYPE, status, include_body)

    def _send(self, body: bytes, content_type: str, status: HTTPStatus, include_body: bool) -> None:
        self.send_response(status)
        self.send_header("Content-Type", content_type)
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        if include_body:
            self.wfile.write(body)


class SysViewServer:
    """Wraps the HTTP server and the aggregator shared by its handlers."""

    def __init__(
        self,
        host: str = ServerConfig.host,
        port: int = ServerConfig.port,
        aggregator: SnapshotAggregator | None = None,
    ) -> None:
        self._aggregator = aggregator or SnapshotAggregator()
        handler = partial(SysViewRequestHandler, aggregator=self._aggregator)
        self._httpd = ThreadingHTTPServer((host, port), handler)
        self._httpd.daemon_threads = True
        self._serving = threading.Event()

    def serve_forever(self) -> None:
        self._serving.set()
        try:
            self._httpd.serve_forever()
        finally:
            self._httpd.server_close()

    def stop(self) -> None:
        if self._serving.is_set():
            self._httpd.shutdown()
            self._serving.clear()
        self._httpd.server_close()

    def server_address(self) -> str:
        host, port = self._httpd.server_address[:2]
        return f"http://{host}:{port}"

    @property
    def port(self) -> int:
        return self._httpd.server_address[1]


def create_app(
    host: str = ServerConfig.host,
    port: int = ServerConfig.port,
    aggregator: SnapshotAggregator | None = None,
) -> SysViewServer:
    """Factory helper used by the CLI and tests."""

    return SysViewServer(host=host, port=port, aggregator=aggregator)


def main() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    config = ServerConfig.from_env()
    server = create_app(host=config.host, port=config.port)
    logger.info("%s is running at http://localhost:%d", APP_NAME, server.port)
    try:
        server.serve_forever()
    except KeyboardInterrupt:
        logger.info("Stopping %s", APP_NAME)


if __name__ == "__main__":
    main()
