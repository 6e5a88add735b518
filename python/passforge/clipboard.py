"""
Best-effort clipboard integration.
"""

import logging
import threading
import time

logger = logging.getLogger(__name__)

CLEAR_AFTER = 60  # seconds


def _clear_later(value: str, delay: float) -> None:
    time.sleep(delay)
    try:
        import pyperclip
        # Leave the clipboard alone if the user copied something else meanwhile
        if pyperclip.paste() == value:
            pyperclip.copy("")
    except Exception as e:
        logger.debug(f"Could not clear clipboard: {e}")


def copy_to_clipboard(value: str, clear_after: float = CLEAR_AFTER) -> bool:
    """
    Copy a value to the system clipboard.

    The clipboard is cleared after ``clear_after`` seconds by a daemon thread.

    Args:
        value: Text to copy
        clear_after: Delay before clearing; 0 disables auto-clear

    Returns:
        True if the value was copied, False if no clipboard is available
    """
    try:
        import pyperclip
        pyperclip.copy(value)
    except ImportError:
        logger.warning("pyperclip not installed. Install with: pip install pyperclip")
        return False
    except Exception as e:
        # pyperclip.PyperclipException when no copy mechanism exists
        logger.warning(f"Could not copy to clipboard: {e}")
        return False

    if clear_after > 0:
        clear_thread = threading.Thread(
            target=_clear_later, args=(value, clear_after), daemon=True
        )
        clear_thread.start()

    return True
