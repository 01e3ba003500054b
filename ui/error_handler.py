# -*- coding: utf-8 -*-
"""Message dialogs shared by the UI layer."""

from PyQt5.QtWidgets import QMessageBox, QWidget

from services.translation_manager import tr


class ErrorHandler:
    """Error and confirmation dialogs."""

    @staticmethod
    def show_error(parent: QWidget, message: str, title: str = None):
        QMessageBox.critical(parent, title or tr("dialog.error"), message)

    @staticmethod
    def confirm(parent: QWidget, message: str, title: str = None) -> bool:
        """Show confirmation dialog, return True if confirmed."""
        reply = QMessageBox.question(
            parent, title or tr("dialog.confirm"), message,
            QMessageBox.Yes | QMessageBox.No, QMessageBox.No
        )
        return reply == QMessageBox.Yes
