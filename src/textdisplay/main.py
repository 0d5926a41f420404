"""
Application Initialization
==========================
Wires logging, the Qt application and the controller together and starts the
Qt Event Loop.

Why is this file needed?
------------------------
It is the composition root. It:
1. Configures logging for the 'textdisplay' namespace.
2. Creates the QApplication, passing argv through unmodified.
3. Hands the application to the controller, which owns the window.
"""
import sys
from typing import Optional, Sequence

from textdisplay.app.application import ApplicationController, create_app
from textdisplay.config import DEFAULT_LOG_LEVEL
from textdisplay.logging_config import setup_logging


def main(argv: Optional[Sequence[str]] = None) -> int:
    # 1. Setup Logging (Console)
    # Use logging.DEBUG to see every display transition
    setup_logging(level=DEFAULT_LOG_LEVEL)

    # 2. Create the Qt Application
    app = create_app(sys.argv if argv is None else argv)

    # 3. Activate (or forward to the running instance) and run the loop
    controller = ApplicationController(app)
    return controller.run()


if __name__ == "__main__":
    sys.exit(main())
