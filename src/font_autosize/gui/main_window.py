"""
Main application window.

The window is the host whose fonts are adjusted: an editor pane, a console
pane, a status line and a scheme selector.
"""
from PyQt5.QtWidgets import (
    QApplication, QWidget, QVBoxLayout, QHBoxLayout, QLabel, QComboBox,
    QPlainTextEdit, QSplitter
)
from PyQt5.QtCore import Qt
from ..core.config import APP_NAME, APP_VERSION
from ..utils.debug import debug_print
from ..utils.display import screen_bounds_for
from .styles import DEFAULT_SCHEME, SCHEMES, get_scheme_style


DEFAULT_FONT_SIZE = 12


class MainWindow(QWidget):
    """Main application window."""

    def __init__(self, component=None):
        super().__init__()
        self.component = component
        app_size = QApplication.font().pointSize()
        self._font_size = app_size if app_size > 0 else DEFAULT_FONT_SIZE
        self._console_font_size = self._font_size
        self._scheme = DEFAULT_SCHEME
        self.init_ui()

    def init_ui(self):
        """Initialize the user interface."""
        self.setWindowTitle(f"{APP_NAME} v{APP_VERSION}")
        self.setGeometry(100, 100, 800, 600)

        layout = QVBoxLayout()

        splitter = QSplitter(Qt.Vertical)
        self.editor = QPlainTextEdit()
        self.editor.setObjectName("editor")
        self.editor.setPlainText("# The editor font follows the resolution of this screen.\n")
        splitter.addWidget(self.editor)

        self.console = QPlainTextEdit()
        self.console.setObjectName("console")
        self.console.setReadOnly(True)
        splitter.addWidget(self.console)
        splitter.setSizes([400, 150])
        layout.addWidget(splitter)

        bottom = QHBoxLayout()
        self.status = QLabel()
        self.status.setObjectName("status")
        bottom.addWidget(self.status, 1)

        self.scheme_combo = QComboBox()
        self.scheme_combo.addItems(self.schemes())
        self.scheme_combo.setCurrentText(self._scheme)
        self.scheme_combo.currentTextChanged.connect(self.set_scheme)
        bottom.addWidget(self.scheme_combo)
        layout.addLayout(bottom)

        self.setLayout(layout)
        self.refresh_appearance()

        debug_print("Main window initialized")

    # Host surface used by FontSizeApplier

    @property
    def font_size(self):
        return self._font_size

    @property
    def console_font_size(self):
        return self._console_font_size

    def set_font_size(self, size):
        """Set the global font size, overriding the platform's default fonts."""
        self._font_size = size
        font = QApplication.font()
        font.setPointSize(size)
        QApplication.setFont(font)

        editor_font = self.editor.font()
        editor_font.setPointSize(size)
        self.editor.setFont(editor_font)
        self.console.appendPlainText(f"Font size set to {size}pt")

    def set_console_font_size(self, size):
        self._console_font_size = size
        console_font = self.console.font()
        console_font.setPointSize(size)
        self.console.setFont(console_font)

    def schemes(self):
        return list(SCHEMES)

    def current_scheme(self):
        return self._scheme

    def set_scheme(self, name):
        if name not in SCHEMES:
            raise ValueError(f"Unknown scheme: {name}")
        self._scheme = name
        self.refresh_appearance()

    def refresh_appearance(self):
        """Re-apply the current scheme so every widget re-renders at the current sizes."""
        self.setStyleSheet(get_scheme_style(self._scheme, self._font_size, self._console_font_size))
        style = self.style()
        for widget in [self] + self.findChildren(QWidget):
            style.unpolish(widget)
            style.polish(widget)
            widget.update()

        bounds = screen_bounds_for(self)
        self.status.setText(
            f"Screen {bounds.resolution_key}  |  editor {self._font_size}pt  |  "
            f"console {self._console_font_size}pt  |  scheme {self._scheme}"
        )

    # Component lifecycle

    def showEvent(self, event):
        super().showEvent(event)
        if self.component is not None and not self.component.running:
            self.component.start(self)
            # apply right away instead of waiting a full interval
            self.component.poll_now()

    def closeEvent(self, event):
        if self.component is not None:
            self.component.stop()
        super().closeEvent(event)
