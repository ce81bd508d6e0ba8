"""
QTimer-backed periodic scheduling.
"""
from PyQt5.QtCore import QTimer


class QtTimerTask:
    """Handle for a repeating QTimer; cancel() is safe to call repeatedly."""

    def __init__(self, timer):
        self._timer = timer

    @property
    def active(self):
        return self._timer is not None and self._timer.isActive()

    def cancel(self):
        timer, self._timer = self._timer, None
        if timer is not None:
            timer.stop()
            timer.deleteLater()


class QtScheduler:
    """Runs callbacks on the Qt event loop at a fixed interval."""

    def __init__(self, parent=None):
        self.parent = parent

    def schedule(self, interval_ms, callback):
        timer = QTimer(self.parent)
        timer.setInterval(interval_ms)
        timer.setSingleShot(False)
        timer.timeout.connect(callback)
        timer.start()
        return QtTimerTask(timer)
