"""
Example Launcher
================
Starts one of the example plots in its own window.

Usage:
    $ python -m gral.examples [pie|xy|bar]

Set GRAL_LOG_LEVEL (e.g. DEBUG) to change the log level.
"""
import argparse
import logging
import os
import sys
from typing import Optional, Sequence

from PySide6.QtWidgets import QApplication

from gral import config
from gral.examples import EXAMPLES
from gral.logging_config import level_from_name, setup_logging

logger = logging.getLogger(__name__)


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(prog="gral-examples", description="Show a GRAL example plot.")
    parser.add_argument("example", nargs="?", choices=sorted(EXAMPLES), default="pie")
    parser.add_argument("--log-file", default=None, help="Also write the log to this file.")
    args = parser.parse_args(argv)

    # 1. Setup Logging
    setup_logging(level=level_from_name(os.environ.get(config.LOG_LEVEL_ENV)), log_file=args.log_file)

    # 2. Create the Qt Application
    app = QApplication(sys.argv[:1])
    app.setApplicationName("GRAL Examples")

    # 3. Show the example
    panel = EXAMPLES[args.example]()
    logger.info(f"Showing example '{panel.title}'")
    panel.show_in_frame()

    # 4. Start Event Loop
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
