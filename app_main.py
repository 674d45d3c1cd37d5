"""Application entry point for the ExamPrepQt client."""

from __future__ import annotations

import argparse
import sys

from PySide6.QtWidgets import QApplication

from exam_app.constants.network_constants import DEMO_SERVER_API_PREFIX, DEMO_SERVER_HOST, DEMO_SERVER_PORT
from exam_app.core.errors import ExamAppError
from exam_app.core.exam_manager import ExamManager
from exam_app.core.services.api_client import ApiClient
from exam_app.core.services.auth_service import AuthService
from exam_app.core.services.content_service import ContentService
from exam_app.core.services.token_store import FileTokenStore, MemoryTokenStore
from exam_app.server.demo_content import DEMO_USER_EMAIL, DEMO_USER_PASSWORD, build_demo_bank
from exam_app.server.demo_server import start_demo_server
from exam_app.ui.main_window import ExamMainWindow
from exam_app.utils.config import AppConfig
from exam_app.utils.logging_config import configure_logging


def _parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Desktop exam preparation client.")
    parser.add_argument("--api-url", help="Base URL of the content API (overrides EXAM_APP_API_URL).")
    parser.add_argument(
        "--demo-server",
        action="store_true",
        help="Serve bundled sample content locally and point the client at it.",
    )
    parser.add_argument("--host", default=DEMO_SERVER_HOST, help="Demo server bind address.")
    parser.add_argument("--port", type=int, default=DEMO_SERVER_PORT, help="Demo server port.")
    parser.add_argument("--log-level", help="Logging level, e.g. DEBUG or INFO.")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    """Read configuration, optionally start the demo API, and launch the Qt UI."""
    args = _parse_args(sys.argv[1:] if argv is None else argv)
    try:
        config = AppConfig.from_environment()
    except ExamAppError as exc:
        sys.exit(f"Invalid configuration: {exc}")

    api_url = args.api_url
    if args.demo_server and not api_url:
        api_url = f"http://{args.host}:{args.port}{DEMO_SERVER_API_PREFIX}"
    config = config.with_overrides(api_url=api_url, log_level=args.log_level)

    logger = configure_logging(config.log_level)
    logger.info("Starting ExamPrepQt against %s", config.api_url)

    if args.demo_server:
        start_demo_server(build_demo_bank(), host=args.host, port=args.port)
        logger.info("Demo account: %s / %s", DEMO_USER_EMAIL, DEMO_USER_PASSWORD)
        # Demo tokens do not survive a restart, so keep them out of the session file.
        token_store = MemoryTokenStore()
    else:
        token_store = FileTokenStore(config.token_file)
        try:
            token_store.load()
        except ExamAppError as exc:
            logger.warning("Discarding stored session: %s", exc)
            token_store.clear()

    api_client = ApiClient(config.api_url, token_provider=token_store, timeout=config.timeout_seconds)
    exam_manager = ExamManager(
        content_service=ContentService(api_client),
        auth_service=AuthService(api_client, token_store),
    )

    app = QApplication(sys.argv[:1])
    window = ExamMainWindow(exam_manager=exam_manager)
    window.show()
    exit_code = app.exec()
    api_client.close()
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
