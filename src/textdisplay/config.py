"""
Configuration & Constants
=========================
Central registry for the application identifier, visible strings and layout
metrics.

Why is this file needed?
------------------------
1. Identity: APP_ID is the one token the host uses to tell instances of this
   application apart. It also names the local server that dedupes launches.
2. Abstraction: UI strings and spacing values live here instead of being
   scattered through widget code.
"""
import logging

# Reverse-domain identifier
APP_ID: str = "com.example.qt.textdisplay"

ORG_ID: str = "example"
ORG_DOMAIN: str = "example.com"
VISIBLE_APP_NAME: str = "Text Display Demo"

# Logging
LOGGER_NAME: str = "textdisplay"
DEFAULT_LOG_LEVEL: int = logging.INFO

# Single-instance handshake
INSTANCE_CONNECT_TIMEOUT_MS: int = 500

# Window
WINDOW_TITLE: str = VISIBLE_APP_NAME
WINDOW_DEFAULT_WIDTH: int = 400
WINDOW_DEFAULT_HEIGHT: int = 300

# Layout (pixels)
LAYOUT_SPACING: int = 12
LAYOUT_MARGIN: int = 24

# Visible strings
INPUT_PLACEHOLDER: str = "Type something here..."
BUTTON_LABEL: str = "Display Text"
DISPLAY_PLACEHOLDER: str = "Your text will appear here"
EMPTY_INPUT_MESSAGE: str = "Please type something first!"
