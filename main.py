#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Property Listing Publisher
Main entry point: opens the property submission wizard in its own window.

Usage:
    python main.py                       # new listing (resumes a saved draft)
    python main.py --type apartamento    # new listing, type preselected
    python main.py --edit 42             # edit container 42
"""

import argparse
import sys

from PyQt5.QtWidgets import QApplication
from PyQt5.QtCore import Qt

from app.config import Config
from services.translation_manager import set_language, tr
from ui.error_handler import ErrorHandler
from utils.logger import setup_logger


def _parse_args(argv):
    parser = argparse.ArgumentParser(description=Config.APP_TITLE)
    parser.add_argument("--edit", dest="property_id", help="id of the container to edit")
    parser.add_argument("--type", dest="property_type", help="preselected property type")
    parser.add_argument("--lang", default=Config.DEFAULT_LANGUAGE, help="es or en")
    return parser.parse_args(argv)


def main():
    """Main application entry point."""

    # Set Qt attributes BEFORE creating QApplication
    QApplication.setAttribute(Qt.AA_EnableHighDpiScaling, True)
    QApplication.setAttribute(Qt.AA_UseHighDpiPixmaps, True)

    # Initialize logging
    logger = setup_logger()

    def _log_unhandled(exc_type, exc_value, exc_traceback):
        logger.critical("Unhandled exception", exc_info=(exc_type, exc_value, exc_traceback))
        if QApplication.instance() is not None:
            ErrorHandler.show_error(None, tr("error.unexpected"))

    sys.excepthook = _log_unhandled

    args = _parse_args(sys.argv[1:])

    app = QApplication(sys.argv)
    app.setApplicationName(Config.APP_NAME)
    app.setOrganizationName(Config.ORGANIZATION)

    set_language(args.lang)

    logger.info("=" * 80)
    logger.info(f"Starting {Config.APP_NAME} {Config.VERSION} (API: {Config.API_BASE_URL})")
    logger.info("=" * 80)

    # Imported after QApplication exists
    from ui.wizards.property_submission import PropertySubmissionWizard

    wizard = PropertySubmissionWizard(
        property_id=args.property_id,
        initial_property_type=args.property_type,
    )
    wizard.setWindowTitle(Config.APP_NAME)
    wizard.setMinimumSize(Config.WINDOW_MIN_WIDTH, Config.WINDOW_MIN_HEIGHT)
    wizard.navigate_requested.connect(lambda route: logger.info(f"Navigate to: {route}"))
    wizard.wizard_completed.connect(lambda data: wizard.close())
    wizard.show()

    exit_code = app.exec_()
    logger.info(f"Application closed with exit code: {exit_code}")
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
