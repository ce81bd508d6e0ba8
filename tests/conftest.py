import os
import sys
from pathlib import Path

import pytest

# Qt widgets are created without a display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

SRC_DIR = Path(__file__).resolve().parents[1] / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))


class ManualTask:
    def __init__(self, scheduler, interval_ms, callback):
        self.interval_ms = interval_ms
        self.callback = callback
        self.next_due = scheduler.now + interval_ms
        self.cancelled = False
        self.cancel_calls = 0

    def cancel(self):
        self.cancel_calls += 1
        self.cancelled = True


class ManualScheduler:
    """Scheduler with a hand-driven clock: advance(ms) fires every task that comes due."""

    def __init__(self):
        self.now = 0
        self.tasks: list[ManualTask] = []

    def schedule(self, interval_ms, callback):
        task = ManualTask(self, interval_ms, callback)
        self.tasks.append(task)
        return task

    def advance(self, ms):
        end = self.now + ms
        while True:
            due = [t for t in self.tasks if not t.cancelled and t.next_due <= end]
            if not due:
                break
            task = min(due, key=lambda t: t.next_due)
            self.now = task.next_due
            task.next_due += task.interval_ms
            task.callback()
        self.now = end


class RecordingHost:
    def __init__(self):
        self.calls = []

    def set_font_size(self, size):
        self.calls.append(("font", size))

    def set_console_font_size(self, size):
        self.calls.append(("console", size))

    def refresh_appearance(self):
        self.calls.append(("refresh",))

    @property
    def applied(self):
        return [c[1] for c in self.calls if c[0] == "font"]


class BoundsFeed:
    """Returns the queued samples in order, then repeats the last one."""

    def __init__(self, *samples):
        self.samples = list(samples)
        self.calls = 0

    def __call__(self):
        self.calls += 1
        if len(self.samples) > 1:
            return self.samples.pop(0)
        return self.samples[0]


@pytest.fixture
def scheduler():
    return ManualScheduler()


@pytest.fixture
def host():
    return RecordingHost()


@pytest.fixture
def base_entries():
    return {
        "normalFontSize": "12",
        "retinaFontSize": "16",
        "retinaWidth": "2560",
        "retinaHeight": "1600",
    }


@pytest.fixture
def dell_entries(base_entries):
    entries = dict(base_entries)
    entries["resolution.1920x1080"] = "dell"
    entries["dellFontSize"] = "14"
    return entries


@pytest.fixture(scope="session")
def qapp():
    QtWidgets = pytest.importorskip("PyQt5.QtWidgets")
    app = QtWidgets.QApplication.instance()
    if app is None:
        app = QtWidgets.QApplication([])
    return app
