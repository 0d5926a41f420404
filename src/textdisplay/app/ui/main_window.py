"""
Main Application Window
=======================
A single column holding the input field, the action button and the display
label, in that order.

Why is this file needed?
------------------------
1. Layout: It builds the widget tree once, when the window is constructed.
2. Routing: It connects the button's clicked signal to the one handler that
   turns the input text into the display text.
"""
from __future__ import annotations

import logging

from PySide6.QtCore import Qt, Slot
from PySide6.QtWidgets import (
    QApplication, QMainWindow, QWidget, QVBoxLayout, QLineEdit, QPushButton, QLabel
)

from textdisplay.app.state import DisplayContent, DisplayStore
from textdisplay.config import (
    WINDOW_TITLE, WINDOW_DEFAULT_WIDTH, WINDOW_DEFAULT_HEIGHT,
    LAYOUT_SPACING, LAYOUT_MARGIN,
    INPUT_PLACEHOLDER, BUTTON_LABEL,
)

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    def __init__(self, application: QApplication) -> None:
        super().__init__()
        self.setWindowTitle(WINDOW_TITLE)

        # The window lives no longer than the application that owns it
        application.aboutToQuit.connect(self.close)
        self.resize(WINDOW_DEFAULT_WIDTH, WINDOW_DEFAULT_HEIGHT)

        self.store = DisplayStore(self)

        self._build_ui()

        self.store.display_changed.connect(self._render_display)
        self._render_display(self.store.content)

    def _build_ui(self) -> None:
        central = QWidget(self)
        layout = QVBoxLayout(central)
        layout.setSpacing(LAYOUT_SPACING)
        layout.setContentsMargins(LAYOUT_MARGIN, LAYOUT_MARGIN, LAYOUT_MARGIN, LAYOUT_MARGIN)

        # --- 1. INPUT ---
        self.input_field = QLineEdit(central)
        self.input_field.setPlaceholderText(INPUT_PLACEHOLDER)

        # --- 2. ACTION ---
        self.action_button = QPushButton(BUTTON_LABEL, central)
        self.action_button.clicked.connect(self.on_action_triggered)

        # --- 3. DISPLAY ---
        self.display_label = QLabel(central)
        self.display_label.setTextFormat(Qt.TextFormat.RichText)
        self.display_label.setWordWrap(True)
        self.display_label.setAlignment(Qt.AlignmentFlag.AlignCenter)

        layout.addWidget(self.input_field)
        layout.addWidget(self.action_button)
        layout.addWidget(self.display_label)
        layout.addStretch(1)

        self.setCentralWidget(central)

    @Slot()
    def on_action_triggered(self) -> None:
        """Show the current input, or the fallback message if it is blank."""
        self.store.show_input(self.input_field.text())

    @Slot(object)
    def _render_display(self, content: DisplayContent) -> None:
        self.display_label.setText(content.to_markup())

    # ---------- Accessors ----------

    def input_text(self) -> str:
        return self.input_field.text()

    def set_input_text(self, text: str) -> None:
        self.input_field.setText(text)

    def display_content(self) -> DisplayContent:
        return self.store.content

    def display_markup(self) -> str:
        return self.display_label.text()
