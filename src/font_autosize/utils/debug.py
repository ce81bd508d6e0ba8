"""
Debug utilities and configuration.
"""
import os
import sys


def _detect_debug_mode():
    """Debug output is on from source, or next to a DEBUG.txt when frozen."""
    override = os.environ.get("FONT_AUTOSIZE_DEBUG")
    if override is not None:
        return override.strip().lower() not in ("", "0", "false", "no", "off")
    if getattr(sys, 'frozen', False):
        # Running as compiled executable
        exe_dir = os.path.dirname(sys.executable)
        return os.path.exists(os.path.join(exe_dir, "DEBUG.txt"))
    # Running as Python script
    return True


DEBUG_MODE = _detect_debug_mode()

# Redirect stdout and stderr to prevent console flashes in compiled exe
if getattr(sys, 'frozen', False) and not DEBUG_MODE:
    devnull = open(os.devnull, 'w')
    sys.stdout = devnull
    sys.stderr = devnull


def debug_print(*a):
    """Print debug messages only in debug mode to avoid console flashes."""
    if DEBUG_MODE:
        print(*a)


def debug_mode_info():
    """Get debug mode information."""
    return {
        'debug_mode': DEBUG_MODE,
        'frozen': getattr(sys, 'frozen', False),
        'executable': sys.executable if getattr(sys, 'frozen', False) else None
    }
