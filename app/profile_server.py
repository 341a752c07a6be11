"""
Local HTTP server that renders the profile page on every request
"""
import logging
import socket
import threading
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer

import config
from page import render_page
from renderer import stylesheet
from utils import etag_for

logger = logging.getLogger(__name__)

PAGE_PATHS = ("/", "/index.html")
CSS_PATH = "/style.css"

REVALIDATE_CACHE_CONTROL = (
    f"public, max-age=0, s-maxage={config.REVALIDATE_SECONDS}, stale-while-revalidate"
)


def _etag_matches(if_none_match, etag: str) -> bool:
    """If-None-Match may be `*` or a comma-separated list of (possibly weak) tags."""
    if not if_none_match:
        return False
    tags = [t.strip() for t in if_none_match.split(",")]
    return "*" in tags or any(t.removeprefix("W/") == etag for t in tags)


class ProfileRequestHandler(BaseHTTPRequestHandler):
    """Serves the rendered page, its stylesheet, and 404 for anything else."""

    # set per server by ProfileServer.start_server
    profile_handle = None
    profile_api_base = None

    def do_GET(self):
        self._respond(send_body=True)

    def do_HEAD(self):
        self._respond(send_body=False)

    def _respond(self, send_body: bool):
        path = self.path.split("?", 1)[0]
        if path in PAGE_PATHS:
            try:
                page = render_page(self.profile_handle, self.profile_api_base, inline=False)
            except Exception:
                logger.exception("Rendering %s failed", path)
                self._send(500, "text/plain; charset=utf-8", "Internal Server Error",
                           send_body, cache_control="no-store")
                return
            if page.ok:
                self._send(200, "text/html; charset=utf-8", page.html, send_body,
                           cache_control=REVALIDATE_CACHE_CONTROL, use_etag=True)
            else:
                self._send(503, "text/html; charset=utf-8", page.html, send_body,
                           cache_control="no-store")
        elif path == CSS_PATH:
            self._send(200, "text/css; charset=utf-8", stylesheet(), send_body,
                       cache_control="public, max-age=3600", use_etag=True)
        else:
            self._send(404, "text/plain; charset=utf-8", "Not Found", send_body,
                       cache_control="no-store")

    def _send(self, status: int, content_type: str, body: str, send_body: bool,
              cache_control: str, use_etag: bool = False):
        payload = body.encode("utf-8")
        etag = etag_for(body) if use_etag else None
        if etag and _etag_matches(self.headers.get("If-None-Match"), etag):
            self.send_response(304)
            self.send_header("ETag", etag)
            self.send_header("Cache-Control", cache_control)
            self.end_headers()
            return

        self.send_response(status)
        self.send_header("Content-Type", content_type)
        self.send_header("Content-Length", str(len(payload)))
        self.send_header("Cache-Control", cache_control)
        if etag:
            self.send_header("ETag", etag)
        self.end_headers()
        if send_body:
            self.wfile.write(payload)

    def log_message(self, format, *args):
        logger.info("%s - %s", self.address_string(), format % args)


class ProfileServer:
    def __init__(self):
        self.server = None
        self.server_thread = None
        self.host = None
        self.port = None
        self.is_running = False

    def start_server(self, host: str = config.DEFAULT_HOST, port: int = 0,
                     handle: str = None, api_base: str = None) -> str:
        """
        Start serving the profile page in a background thread.
        Port 0 picks a free port. Returns the local URL of the page.
        Automatically stops any existing server before starting a new one.
        """
        if self.is_running:
            self.stop_server()

        self.host = host
        self.port = port or self._find_free_port()

        # Handler class per server so each instance keeps its own handle/api_base
        handler = type("BoundProfileRequestHandler", (ProfileRequestHandler,),
                       {"profile_handle": handle, "profile_api_base": api_base})
        self.server = ThreadingHTTPServer((self.host, self.port), handler)

        self.server_thread = threading.Thread(target=self.server.serve_forever, daemon=True)
        self.server_thread.start()
        self.is_running = True
        logger.info("Serving profile page at %s", self.get_current_url())
        return self.get_current_url()

    def stop_server(self):
        """Stop the server and release the socket"""
        if self.server:
            self.server.shutdown()
            self.server.server_close()
            self.server = None

        if self.server_thread:
            self.server_thread.join(timeout=2)  # Wait up to 2 seconds
            self.server_thread = None

        self.is_running = False

    def is_server_running(self) -> bool:
        """Check if the server is currently running"""
        return self.is_running and self.server is not None

    def get_current_url(self) -> str:
        """Get the current server URL if running, None otherwise"""
        if self.is_server_running():
            host = "localhost" if self.host in ("", "0.0.0.0", "127.0.0.1") else self.host
            return f"http://{host}:{self.port}/"
        return None

    def _find_free_port(self) -> int:
        """Find a free port to use for the server"""
        with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
            s.bind((self.host or "", 0))
            s.listen(1)
            port = s.getsockname()[1]
        return port


# Global instance for the CLI and the Streamlit app
_profile_server = ProfileServer()


def serve_profile(host: str = config.DEFAULT_HOST, port: int = 0,
                  handle: str = None, api_base: str = None) -> str:
    """
    Convenience function to (re)start the shared profile server.
    Returns URL where the page can be accessed.
    """
    return _profile_server.start_server(host, port, handle, api_base)


def cleanup_profile_server():
    """Stop the shared profile server"""
    _profile_server.stop_server()


def get_server_status() -> dict:
    """Get current server status information"""
    return {
        "is_running": _profile_server.is_server_running(),
        "url": _profile_server.get_current_url(),
        "port": _profile_server.port if _profile_server.is_running else None
    }
