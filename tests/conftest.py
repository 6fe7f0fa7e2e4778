"""Test configuration and fixtures for corsprobe."""

import tempfile
import threading
import time
from collections.abc import Generator
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from pathlib import Path

import httpx
import pytest

from corsprobe.config import ENV_KEYS
from corsprobe.modules.scanner import ScanConfig


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for testing."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    """Keep tests away from the real ~/.corsprobe config and CORSPROBE_* env vars."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setattr(Path, "home", lambda: home)
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    return home


@pytest.fixture
def scan_config() -> ScanConfig:
    """A fast scan configuration."""
    return ScanConfig(timeout=2.0, concurrency=2)


@pytest.fixture
def urls_file(temp_dir: Path) -> Path:
    """A URL list with blank and invalid lines mixed in."""
    path = temp_dir / "urls.txt"
    path.write_text("http://a.test/\n\nnot-a-url\n   \nhttps://b.test/api\n")
    return path


class OverlapRecordingTransport(httpx.BaseTransport):
    """Transport that records how many requests are in flight at once."""

    def __init__(self, delay: float = 0.02, headers: dict[str, str] | None = None):
        self.delay = delay
        self.headers = headers or {}
        self._lock = threading.Lock()
        self.active = 0
        self.max_active = 0
        self.requests: list[httpx.Request] = []

    def handle_request(self, request: httpx.Request) -> httpx.Response:
        with self._lock:
            self.active += 1
            self.max_active = max(self.max_active, self.active)
            self.requests.append(request)
        try:
            time.sleep(self.delay)
        finally:
            with self._lock:
                self.active -= 1
        return httpx.Response(200, headers=self.headers, request=request)


@pytest.fixture
def overlap_transport() -> OverlapRecordingTransport:
    return OverlapRecordingTransport()


class TricklingHandler(BaseHTTPRequestHandler):
    """Serves a CORS response whose body, or headers, arrive in slow pieces."""

    chunk_delay = 0.6

    def do_GET(self):
        try:
            if self.path == "/slow-headers":
                self.wfile.write(b"HTTP/1.1 200 OK\r\n")
                for name in ("X-One", "X-Two", "X-Three"):
                    self.wfile.flush()
                    time.sleep(self.chunk_delay)
                    self.wfile.write(f"{name}: 1\r\n".encode())
                self.wfile.write(b"Content-Length: 0\r\n\r\n")
                self.wfile.flush()
                return

            self.send_response(200)
            self.send_header("Access-Control-Allow-Origin", "*")
            self.send_header("Content-Length", "8")
            self.end_headers()
            self.wfile.flush()
            for _ in range(8):
                time.sleep(self.chunk_delay)
                self.wfile.write(b"x")
                self.wfile.flush()
        except (BrokenPipeError, ConnectionResetError):
            pass

    def log_message(self, format, *args):
        pass


@pytest.fixture
def trickling_server() -> Generator[str, None, None]:
    """Local HTTP server that dribbles responses; yields its base URL."""
    server = ThreadingHTTPServer(("127.0.0.1", 0), TricklingHandler)
    server.daemon_threads = True
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    try:
        host, port = server.server_address[:2]
        yield f"http://{host}:{port}"
    finally:
        server.shutdown()
        server.server_close()
