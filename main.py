# main.py
# Main entry point for the Tinker Buttons demo.

from __future__ import annotations

import argparse
import logging
import sys

from utils.constants import InvalidScreenError, Screen, screen_from_label, screen_from_str, screen_labels

logger = logging.getLogger(__name__)


def _parse_screen(value: str) -> Screen:
    """Accept a display label ("Buttons") or an identifier ("buttons")."""
    screen = screen_from_str(value.lower())
    if screen is not None:
        return screen
    try:
        return screen_from_label(value)
    except InvalidScreenError as e:
        raise argparse.ArgumentTypeError(str(e)) from None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tinker-buttons",
        description="Demo of button styles and the Button Shapes accessibility mode.",
    )
    parser.add_argument(
        "--screen",
        type=_parse_screen,
        default=Screen.IDLE,
        help=f"Screen to show at startup: {', '.join(screen_labels())}",
    )
    parser.add_argument(
        "--button-shapes",
        action="store_true",
        help="Start with Button Shapes on, regardless of the saved setting",
    )
    parser.add_argument(
        "--settings",
        metavar="PATH",
        help="Settings file to use instead of app_settings.json",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity (default: INFO, which shows every tap)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """
    Parses the command line, creates the application and the main window,
    and starts the event loop.
    """
    raw_argv = list(sys.argv if argv is None else argv)
    args = build_parser().parse_args(raw_argv[1:])

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # Qt imports are deferred so --help works without a display
    from utils.exception_safe_application import ExceptionSafeApplication
    from services.settings_service import settings_service
    from main_window import MainWindow

    app = ExceptionSafeApplication(raw_argv)
    app.setStyle("Fusion")

    if args.settings:
        settings_service.use_file(args.settings)

    main_win = MainWindow(
        initial_screen=args.screen,
        button_shapes_enabled=True if args.button_shapes else None,
    )
    main_win.show()
    logger.info("Started on screen %s", args.screen.value)

    return app.exec()


if __name__ == '__main__':
    raise SystemExit(main())
