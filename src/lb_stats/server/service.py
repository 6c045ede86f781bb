"""Data endpoint serving exported CSV files as JSON."""

from __future__ import annotations

from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
import json
import logging
from pathlib import Path
from typing import Any
from urllib.parse import parse_qs, urlparse

from lb_stats.common import FormatError, UserInputError
from lb_stats.source import dataset_path, read_csv_records

logger = logging.getLogger(__name__)


def run_server(stats_dir: Path, host: str = "127.0.0.1", port: int = 8080) -> None:
    """Starts the data endpoint and blocks until interrupted."""

    server = build_server(stats_dir, host=host, port=port)
    bound_host, bound_port = server.server_address[:2]
    print(f"[OK] data_url=http://{bound_host}:{bound_port}/api/data?type=watched")
    print("[OK] press Ctrl+C to stop")

    try:
        server.serve_forever()
    except KeyboardInterrupt:
        pass
    finally:
        server.server_close()


def build_server(stats_dir: Path, host: str = "127.0.0.1", port: int = 8080) -> ThreadingHTTPServer:
    if not stats_dir.is_dir():
        raise UserInputError(f"Stats directory not found: {stats_dir}")
    return ThreadingHTTPServer((host, port), _build_handler(stats_dir))


def _build_handler(stats_dir: Path) -> type[BaseHTTPRequestHandler]:
    class DataHandler(BaseHTTPRequestHandler):
        server_version = "LbStatsData/0.1"

        def do_GET(self) -> None:  # noqa: N802
            parsed = urlparse(self.path)
            endpoint = parsed.path or "/"
            params = parse_qs(parsed.query)

            try:
                if endpoint == "/health":
                    self._send_json({"status": "ok"})
                    return

                if endpoint == "/api/data":
                    dataset_id = _get_query_param(params, "type") or ""
                    path = dataset_path(stats_dir, dataset_id)
                    if not path.is_file():
                        self._send_json({"error": f"File not found: {dataset_id}"}, status=404)
                        return
                    self._send_json(read_csv_records(path))
                    return

                if endpoint.endswith(".csv") and endpoint.count("/") == 1:
                    path = dataset_path(stats_dir, endpoint[1:-4])
                    if not path.is_file():
                        self._send_json({"error": f"Not found: {endpoint}"}, status=404)
                        return
                    self._send_text(path.read_text(encoding="utf-8-sig"), "text/csv")
                    return

                self._send_json({"error": f"Not found: {endpoint}"}, status=404)
            except UserInputError as exc:
                self._send_json({"error": str(exc)}, status=400)
            except (FormatError, OSError) as exc:
                logger.error("data endpoint failed for %s: %s", endpoint, exc)
                self._send_json({"error": f"CSV read error: {exc}"}, status=500)

        def log_message(self, fmt: str, *args: object) -> None:
            logger.debug("%s - %s", self.address_string(), fmt % args)

        def _send_text(self, payload: str, content_type: str, status: int = 200) -> None:
            data = payload.encode("utf-8")
            self.send_response(status)
            self.send_header("Content-Type", f"{content_type}; charset=utf-8")
            self.send_header("Access-Control-Allow-Origin", "*")
            self.send_header("Content-Length", str(len(data)))
            self.end_headers()
            self.wfile.write(data)

        def _send_json(self, payload: Any, status: int = 200) -> None:
            body = json.dumps(payload, ensure_ascii=False).encode("utf-8")
            self.send_response(status)
            self.send_header("Content-Type", "application/json; charset=utf-8")
            self.send_header("Access-Control-Allow-Origin", "*")
            self.send_header("Cache-Control", "no-store")
            self.send_header("Content-Length", str(len(body)))
            self.end_headers()
            self.wfile.write(body)

    return DataHandler


def _get_query_param(params: dict[str, list[str]], key: str) -> str | None:
    values = params.get(key)
    if not values:
        return None
    value = values[0].strip()
    return value or None
