import sys
import traceback

from .logger import setup_logger


def install_exception_handler():
    """Install global exception handler."""
    sys.excepthook = handle_exception


def handle_exception(exc_type, exc_value, exc_traceback):
    """Global exception handler."""
    # Ignore KeyboardInterrupt
    if issubclass(exc_type, KeyboardInterrupt):
        sys.__excepthook__(exc_type, exc_value, exc_traceback)
        return

    try:
        logger = setup_logger("CrashHandler")
        logger.critical("Uncaught exception", exc_info=(exc_type, exc_value, exc_traceback))
    except Exception:
        # Fallback if logger fails
        print("Critical error:", exc_value, file=sys.stderr)
        traceback.print_tb(exc_traceback)
