"""
Main entry point for Tadpoles.
Loads settings, builds the window and starts the frame clock.

Set TADPOLES_LOG=/path/to/file.log to also write a debug log to disk.
"""

import os
import sys

from PyQt5.QtWidgets import QApplication

LOG_ENV_VAR = "TADPOLES_LOG"


def configure_logging(environ=None) -> bool:
    """Turn on file logging when TADPOLES_LOG names a file."""
    from tadpoles.utils.logger import logger

    environ = os.environ if environ is None else environ
    path = environ.get(LOG_ENV_VAR)
    if not path:
        return False
    logger.enable_file_logging(path)
    logger.info(f"Logging to {path}", component="APP")
    return True


def main():
    # Initialize logger first
    from tadpoles.utils.logger import logger
    configure_logging()

    logger.info("=" * 40, component="APP")
    logger.info("Tadpoles starting", component="APP")
    logger.info("Click: toggle scatter/group mode", component="APP")
    logger.info("Drag: draw a guide path", component="APP")
    logger.info("Space: show chain vertices", component="APP")
    logger.info("=" * 40, component="APP")

    app = QApplication(sys.argv)

    from tadpoles.flock.flock_controller import FlockController
    from tadpoles.flock.flock_state import FlockSettings
    from tadpoles.gui.main_window import MainWindow

    controller = FlockController(FlockSettings.load())
    window = MainWindow(controller)
    window.show()
    controller.start()

    exit_code = app.exec_()
    logger.disable_file_logging()
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
