"""
Application Initialization
==========================
This module wires the Model-View pair together and starts the Qt Event Loop.

Why is this file needed?
------------------------
It acts as the "Dependency Injection" root. It:
1. Configures logging from the environment (see packcalc.config).
2. Instantiates the form state (FormStore).
3. Instantiates the Main Window (View), passing the store into it.
"""
import logging
import sys

from packcalc.config import LOG_FILE, LOG_LEVEL
from packcalc.logging_config import setup_logging
from packcalc.app.application import create_app
from packcalc.app.state import FormStore
from packcalc.view.main_window import MainWindow

logger = logging.getLogger(__name__)


def main() -> None:
    # 1. Setup Logging (Console + Optional File)
    setup_logging(level=LOG_LEVEL, log_file=LOG_FILE)

    # 2. Create the Qt Application
    app = create_app()

    # 3. Initialize the form state
    store = FormStore()

    # 4. Initialize the Main Window, passing the store
    window = MainWindow(store)
    window.show()
    logger.debug("Main window shown.")

    # 5. Start Event Loop
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
