"""
Periodic screen resolution polling and font size application.
"""
from ..utils import debug
from .config import POLL_INTERVAL_MS
from .font_table import ScreenBounds


class FontSizeApplier:
    """Apply action: push a font size into the host, then force a refresh.

    The host must provide set_font_size(size), set_console_font_size(size)
    and refresh_appearance().
    """

    def __init__(self, host):
        self.host = host

    def __call__(self, font_size):
        self.host.set_font_size(font_size)
        self.host.set_console_font_size(font_size)
        # fonts set above only show once the host re-renders its scheme
        self.host.refresh_appearance()
        debug.debug_print(f"[apply] font size {font_size}")


class ResolutionPoller:
    """Samples the screen bounds on a timer and applies the matching font size.

    The apply action only fires when the sampled bounds differ from the
    previous sample.
    """

    def __init__(self, tables, bounds_source, apply_action, scheduler, interval_ms=POLL_INTERVAL_MS):
        self.tables = tables
        self.bounds_source = bounds_source
        self.apply_action = apply_action
        self.scheduler = scheduler
        self.interval_ms = interval_ms
        self.last_bounds = None
        self._task = None

    @property
    def running(self):
        return self._task is not None

    def start(self):
        if self._task is not None:
            return
        self._task = self.scheduler.schedule(self.interval_ms, self.tick)
        debug.debug_print(f"[poll] started, every {self.interval_ms} ms")

    def stop(self):
        task, self._task = self._task, None
        if task is not None:
            task.cancel()
            debug.debug_print("[poll] stopped")

    def tick(self):
        """Sample once. Returns the applied font size, or None when nothing changed."""
        bounds = ScreenBounds(*self.bounds_source())
        if bounds == self.last_bounds:
            return None
        self.last_bounds = bounds

        screen_name = self.tables.screen_name_for(bounds)
        font_size = self.tables.font_size_for_screen(screen_name)
        debug.debug_print(f"[poll] resolution {bounds.resolution_key} -> '{screen_name}', font size {font_size}")
        self.apply_action(font_size)
        return font_size
