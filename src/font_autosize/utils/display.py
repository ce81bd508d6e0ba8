"""
DPI awareness and display utilities.
"""
import os
from ..core.font_table import ScreenBounds


# Qt reads these before QApplication is created; values already set win
QT_DPI_ENVIRONMENT = {
    "QT_ENABLE_HIGHDPI_SCALING": "1",
    "QT_SCALE_FACTOR_ROUNDING_POLICY": "PassThrough",
}


def _dpi_awareness_calls(ctypes):
    """Windows DPI awareness calls, newest API first."""
    # Windows 10+ : Per-Monitor-V2
    yield lambda: ctypes.windll.user32.SetProcessDpiAwarenessContext(ctypes.c_void_p(-4))
    # Windows 8.1 : Per-Monitor
    yield lambda: ctypes.windll.shcore.SetProcessDpiAwareness(2)
    # Vista/7 : system DPI only
    yield lambda: ctypes.windll.user32.SetProcessDPIAware()


def _enable_win_per_monitor_dpi_awareness():
    """Make Windows report each monitor's real resolution; returns True when a call succeeded."""
    if os.name != "nt":
        return False
    import ctypes
    for call in _dpi_awareness_calls(ctypes):
        try:
            call()
            return True
        except (AttributeError, OSError):
            continue
    return False


def setup_dpi_environment():
    """Prepare the process for high-DPI screens. Call before QApplication exists."""
    for name, value in QT_DPI_ENVIRONMENT.items():
        os.environ.setdefault(name, value)
    return _enable_win_per_monitor_dpi_awareness()


def screen_bounds_for(widget):
    """Bounds of the screen showing widget's window.

    Returns ScreenBounds(0, 0) when there is no application, no widget or no
    screen, which never matches a configured resolution.
    """
    from PyQt5.QtGui import QGuiApplication

    if widget is None or QGuiApplication.instance() is None:
        return ScreenBounds(0, 0)

    screen = None
    handle = widget.window().windowHandle()
    if handle is not None:
        screen = handle.screen()
    if screen is None:
        screen = QGuiApplication.primaryScreen()
    if screen is None:
        return ScreenBounds(0, 0)

    # width and height of the screen geometry match the screen resolution
    geometry = screen.geometry()
    return ScreenBounds(geometry.width(), geometry.height())
