"""
Application entry point: show the host window and start the font component.
"""
import sys

from .utils.display import setup_dpi_environment


def main():
    """Main application entry point."""
    # Set up DPI awareness before importing PyQt
    setup_dpi_environment()

    from PyQt5.QtWidgets import QApplication
    from PyQt5.QtCore import Qt
    from .core.component import FontSizeAutoChange
    from .core.config import APP_NAME, APP_VERSION
    from .gui.main_window import MainWindow
    from .utils.debug import debug_mode_info, debug_print

    debug_print(f"Starting {APP_NAME} v{APP_VERSION}")
    debug_print(f"Debug mode info: {debug_mode_info()}")

    QApplication.setAttribute(Qt.AA_EnableHighDpiScaling, True)
    QApplication.setAttribute(Qt.AA_UseHighDpiPixmaps, True)

    # A missing or malformed font configuration aborts startup
    component = FontSizeAutoChange()

    app = QApplication(sys.argv)
    app.setApplicationName(APP_NAME)
    app.setApplicationVersion(APP_VERSION)

    window = MainWindow(component)
    window.show()

    # Start event loop
    sys.exit(app.exec_())
