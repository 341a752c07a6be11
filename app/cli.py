"""
truth-engine-viewer

Command line entry point for the profile viewer.

Commands:
  render  Fetch the profile once and write a static HTML page.
  serve   Run the local HTTP server; the page is fetched and rendered per request.

The Streamlit variant is started separately with ``streamlit run app/gui.py``.
"""

from __future__ import annotations

import argparse
import logging
import time
from pathlib import Path
from typing import Optional, Sequence

import config
from page import render_page
from profile_server import cleanup_profile_server, serve_profile

logger = logging.getLogger(__name__)


def cmd_render(args: argparse.Namespace) -> int:
    page = render_page(args.handle, args.api_url, inline=not args.linked_css)
    out = Path(args.out)
    out.write_text(page.html, encoding="utf-8")
    if not page.ok:
        logger.error("Profile unavailable; wrote error page to %s", out)
        return 1
    logger.info("Wrote %s", out)
    return 0


def cmd_serve(args: argparse.Namespace) -> int:
    default_host, default_port = config.get_server_address()
    url = serve_profile(
        host=args.host or default_host,
        port=default_port if args.port is None else args.port,
        handle=args.handle,
        api_base=args.api_url,
    )
    print(f"Serving {url} (Ctrl+C to stop)")
    try:
        while True:
            time.sleep(1)
    except KeyboardInterrupt:
        pass
    finally:
        cleanup_profile_server()
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="truth-engine-viewer",
        description="Render a Truth Engine profile as a portfolio page.",
    )
    parser.add_argument("--log-level", default=None, help="Logging level (default: $LOG_LEVEL or INFO)")
    sub = parser.add_subparsers(dest="command", required=True)

    def add_source_args(p: argparse.ArgumentParser) -> None:
        p.add_argument("--handle", default=None,
                       help=f"Profile handle (default: ${config.HANDLE_ENV_VAR})")
        p.add_argument("--api-url", default=None,
                       help=f"Truth Engine origin (default: ${config.API_URL_ENV_VAR} or {config.DEFAULT_API_BASE})")

    render = sub.add_parser("render", help="Write the page to a static HTML file")
    add_source_args(render)
    render.add_argument("--out", default="index.html", help="Output file (default: index.html)")
    render.add_argument("--linked-css", action="store_true",
                        help="Link style.css instead of embedding it")
    render.set_defaults(func=cmd_render)

    serve = sub.add_parser("serve", help="Serve the page over HTTP")
    add_source_args(serve)
    serve.add_argument("--host", default=None, help=f"Bind address (default: $VIEWER_HOST or {config.DEFAULT_HOST})")
    serve.add_argument("--port", type=int, default=None, help=f"Port (default: $VIEWER_PORT or {config.DEFAULT_PORT})")
    serve.set_defaults(func=cmd_serve)

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    config.configure_logging(args.log_level)
    return args.func(args)


if __name__ == "__main__":
    raise SystemExit(main())
