"""Command-line interface for webbind.

The CLI is thin: it loads configuration, sets up logging, and delegates to
the binding modules.
"""

import argparse
import logging
import sys

from webbind.constants import APP_NAME
from webbind.errors import ProjectError
from webbind.infra.config_store import Config
from webbind.native.runtime import NativeRuntimeStatus, detect_native_runtime
from webbind.native.structs import WindowSizeHint
from webbind.paths import DOWNLOAD_DIR
from webbind.runtime_download import download_runtime_installer
from webbind.webview import Webview, version


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog=APP_NAME, description="Native webview window from Python")
    parser.add_argument("--library", default=None, help="Path to the native webview library")
    parser.add_argument("--log-level", default=None, help="Logging level (defaults to config log_level)")
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("version", help="Print the native library version")
    sub.add_parser("doctor", help="Check that the native library and browser runtime are usable")

    open_p = sub.add_parser("open", help="Open a window and run until it is closed")
    open_p.add_argument("url", nargs="?", default=None, help="URL to navigate to")
    open_p.add_argument("--html", default=None, help="HTML file to render instead of a URL")
    open_p.add_argument("--title", default=None)
    open_p.add_argument("--width", type=int, default=None)
    open_p.add_argument("--height", type=int, default=None)
    open_p.add_argument("--fixed", action="store_true", help="Prevent the window from being resized")
    open_p.add_argument("--debug", action="store_true", help="Enable developer tools")

    fetch_p = sub.add_parser("fetch-runtime", help="Download the WebView2 runtime bootstrapper (Windows)")
    fetch_p.add_argument("dest", nargs="?", default=DOWNLOAD_DIR, help="Directory to save the installer in")
    return parser


def _cmd_version(args, config) -> int:
    info = version(library_path=args.library, config=config)
    print(f"{APP_NAME}: native webview {info}")
    return 0


def _cmd_doctor(args, config) -> int:
    info = detect_native_runtime(args.library, config)
    print(f"{info.status.value}: {info.detail}")
    if info.library_path:
        print(f"library: {info.library_path}")
    return 0 if info.status == NativeRuntimeStatus.READY else 1


def _cmd_open(args, config) -> int:
    html = None
    if args.html:
        with open(args.html, "r", encoding="utf-8") as f:
            html = f.read()

    default_width, default_height = config.window_size()
    width = args.width or default_width
    height = args.height or default_height
    hint = WindowSizeHint.FIXED if args.fixed else WindowSizeHint.NONE

    with Webview(debug=args.debug or bool(config.get("debug")), library_path=args.library, config=config) as webview:
        webview.set_title(args.title or config.get("window_title"))
        webview.set_size(width, height, hint)
        if html is not None:
            webview.set_html(html)
        else:
            webview.navigate(args.url)
        webview.run()
    return 0


def _cmd_fetch_runtime(args, config) -> int:
    result = download_runtime_installer(args.dest)
    print(f"Saved {result.local_path}")
    return 0


_COMMANDS = {
    "version": _cmd_version,
    "doctor": _cmd_doctor,
    "open": _cmd_open,
    "fetch-runtime": _cmd_fetch_runtime,
}


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.command == "open" and (args.url is None) == (args.html is None):
        parser.error("open needs exactly one of URL or --html")
    config = Config()

    logging.basicConfig(
        level=(args.log_level or config.log_level()).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    if config.load_error:
        logging.getLogger(__name__).warning("Ignoring unreadable config: %s", config.load_error)

    try:
        return _COMMANDS[args.command](args, config)
    except ProjectError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    except OSError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2


__all__ = ["build_parser", "main"]
