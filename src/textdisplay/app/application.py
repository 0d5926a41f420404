"""
Application Controller
======================
Owns the process lifecycle: startup, single-instance activation, shutdown.

Why is this file needed?
------------------------
1. Lifecycle: It creates the main window on first activation and brings the
   same window back to the front on every later activation.
2. Uniqueness: A lock file named after APP_ID makes the first process the
   primary instance, which then listens on a QLocalServer of the same name.
   A second launch connects to it, which the primary treats as an
   activation request, and then exits.
"""
from __future__ import annotations

import logging
import os
from typing import Sequence

from PySide6.QtCore import QCoreApplication, QDir, QLockFile, Qt
from PySide6.QtNetwork import QLocalServer, QLocalSocket
from PySide6.QtWidgets import QApplication

from textdisplay.app.ui.main_window import MainWindow
from textdisplay.config import (
    APP_ID, ORG_ID, ORG_DOMAIN, VISIBLE_APP_NAME, INSTANCE_CONNECT_TIMEOUT_MS
)

logger = logging.getLogger(__name__)


def create_app(argv: Sequence[str]) -> QApplication:
    """Create and configure the QApplication instance."""
    QCoreApplication.setOrganizationName(ORG_ID)
    QCoreApplication.setOrganizationDomain(ORG_DOMAIN)
    QCoreApplication.setApplicationName(APP_ID)

    # Only one QApplication may exist per process
    app = QApplication.instance() or QApplication(list(argv))

    app.setApplicationDisplayName(VISIBLE_APP_NAME)
    app.setDesktopFileName(APP_ID)
    return app


class ApplicationController:
    """Drives a host-provided QApplication instead of subclassing it."""

    def __init__(self, app: QApplication, app_id: str = APP_ID) -> None:
        self.app = app
        self.app_id = app_id
        self._window: MainWindow | None = None
        self._server: QLocalServer | None = None
        self._lock: QLockFile | None = None

        self.app.aboutToQuit.connect(self.shutdown)

    @property
    def window(self) -> MainWindow | None:
        return self._window

    @property
    def is_primary(self) -> bool:
        return self._server is not None

    def register(self) -> bool:
        """
        Claim the application id for this process.

        The lock file decides who is primary. Only its holder may replace a
        leftover server name, so a slow or racing primary is never evicted.

        Returns:
            True if this process is now the primary instance, False if another
            instance already holds the id and has been asked to activate.
        """
        lock = QLockFile(os.path.join(QDir.tempPath(), f"{self.app_id}.lock"))
        if not lock.tryLock(0):
            self._forward_activation()
            return False

        # Holding the lock means any server name left behind is stale
        QLocalServer.removeServer(self.app_id)
        server = QLocalServer(self.app)
        if not server.listen(self.app_id):
            msg = f"Could not register '{self.app_id}': {server.errorString()}"
            logger.error(msg)
            server.deleteLater()
            lock.unlock()
            raise RuntimeError(msg)

        server.newConnection.connect(self._on_new_connection)
        self._server = server
        self._lock = lock
        logger.info(f"Registered as primary instance of '{self.app_id}'.")
        return True

    def activate(self) -> MainWindow:
        """Create the window if there is none, then bring it to the front."""
        window = self._window
        if window is None:
            window = MainWindow(self.app)
            window.setAttribute(Qt.WidgetAttribute.WA_DeleteOnClose)
            window.destroyed.connect(self._on_window_destroyed)
            self._window = window
            logger.info("Main window created.")

        if window.isMinimized():
            window.setWindowState(window.windowState() & ~Qt.WindowState.WindowMinimized)
        window.show()
        window.raise_()
        window.activateWindow()
        return window

    def run(self) -> int:
        """Register, activate and hand control to the Qt event loop."""
        if not self.register():
            return 0
        self.activate()
        return self.app.exec()

    def shutdown(self) -> None:
        if self._server is not None:
            self._server.close()
            self._server.deleteLater()
            self._server = None
        if self._lock is not None:
            self._lock.unlock()
            self._lock = None
            logger.info(f"Released '{self.app_id}'.")

    def _forward_activation(self) -> None:
        # The connection itself is the activation request
        probe = QLocalSocket()
        probe.connectToServer(self.app_id)
        if probe.waitForConnected(INSTANCE_CONNECT_TIMEOUT_MS):
            probe.disconnectFromServer()
            logger.info(f"'{self.app_id}' is already running, activation forwarded.")
        else:
            logger.warning(
                f"'{self.app_id}' is already running but did not answer: {probe.errorString()}"
            )

    def _on_new_connection(self) -> None:
        # A secondary launch only needs to connect; no payload is exchanged
        while self._server is not None and self._server.hasPendingConnections():
            conn = self._server.nextPendingConnection()
            conn.disconnectFromServer()
            conn.deleteLater()
        logger.info("Activation requested by another instance.")
        self.activate()

    def _on_window_destroyed(self, *_args) -> None:
        self._window = None
        logger.info("Main window closed.")
