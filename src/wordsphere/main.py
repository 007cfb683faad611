"""
Application Initialization
==========================
This module wires the session, the main window and the Qt event loop.

Why is this file needed?
------------------------
It acts as the "Dependency Injection" root. It:
1. Parses the command-line options and sets up logging.
2. Instantiates the session (the single owner of all mutable state).
3. Seeds the sphere with the sample words.
4. Passes the session into the Main Window and starts the Event Loop.
"""
import argparse
import logging
import os
import sys
from typing import Optional, Sequence

from PySide6.QtWidgets import QApplication
from PySide6.QtCore import QCoreApplication

from wordsphere.config import InteractionMode, SAMPLE_WORDS_PATH, VISIBLE_APP_NAME
from wordsphere.controller.session import WordCloudSession
from wordsphere.logging_config import setup_logging
from wordsphere.model.io import load_sample_words
from wordsphere.view.main_window import MainWindow

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="wordsphere", description=VISIBLE_APP_NAME)
    parser.add_argument(
        "--mode",
        choices=[m.value for m in InteractionMode],
        default=InteractionMode.HOVER_PAUSE.value,
        help="hover: pointer over the sphere pauses it; rotate: pointer steers it",
    )
    parser.add_argument("--no-samples", action="store_true", help="start with an empty sphere")
    parser.add_argument("--debug", action="store_true", help="verbose logging")
    parser.add_argument("--log-file", default=None, help="also write the log to this file")
    return parser.parse_args(argv)


def create_session(args: argparse.Namespace) -> WordCloudSession:
    session = WordCloudSession(mode=InteractionMode(args.mode))
    if not args.no_samples:
        session.add_words(load_sample_words(SAMPLE_WORDS_PATH))
    logger.info(f"Session ready with {session.distinct_word_count()} words ({args.mode} mode).")
    return session


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)

    # 1. Setup Logging (Console + Optional File)
    setup_logging(level=logging.DEBUG if args.debug else logging.INFO, log_file=args.log_file)

    # 2. Create the Qt Application
    os.environ.setdefault("QT_ENABLE_HIGHDPI_SCALING", "1")
    QCoreApplication.setApplicationName("wordsphere")
    app = QApplication(sys.argv[:1])
    app.setApplicationDisplayName(VISIBLE_APP_NAME)

    # 3. Initialize the session
    session = create_session(args)

    # 4. Initialize the Main Window, passing the session
    window = MainWindow(session)
    window.show()

    # 5. Start Event Loop
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
