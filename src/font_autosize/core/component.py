"""
FontSizeAutoChange component: load the font tables and drive the poller.
"""
from ..utils import debug
from ..utils.paths import _get_properties_path
from .config import COMPONENT_NAME, POLL_INTERVAL_MS
from .font_table import FontTables
from .poller import FontSizeApplier, ResolutionPoller
from .properties import load_properties


class FontSizeAutoChange:
    """Adjusts the host's font size to the resolution of its current screen.

    Construction loads the font configuration and fails with
    ConfigurationError when it is missing or malformed. start() and stop()
    are the activation and deactivation hooks.
    """

    component_name = COMPONENT_NAME

    def __init__(self, properties_path=None, entries=None, interval_ms=POLL_INTERVAL_MS):
        if entries is None:
            entries = load_properties(properties_path or _get_properties_path())
        self.tables = FontTables.from_properties(entries)
        self.interval_ms = interval_ms
        self.poller = None
        debug.debug_print(f"[config] {self.component_name}: {self.tables!r}")

    @property
    def running(self):
        return self.poller is not None and self.poller.running

    def start(self, host, scheduler=None, bounds_source=None):
        """Begin polling on behalf of host.

        scheduler defaults to a QTimer-backed scheduler and bounds_source to
        the screen currently showing host.
        """
        if self.running:
            return self.poller
        if scheduler is None:
            from ..gui.timer import QtScheduler
            scheduler = QtScheduler(host)
        if bounds_source is None:
            from ..utils.display import screen_bounds_for
            bounds_source = lambda: screen_bounds_for(host)

        self.poller = ResolutionPoller(
            self.tables,
            bounds_source,
            FontSizeApplier(host),
            scheduler,
            interval_ms=self.interval_ms,
        )
        self.poller.start()
        return self.poller

    def poll_now(self):
        """Run one poll immediately; returns the applied font size or None."""
        if not self.running:
            return None
        return self.poller.tick()

    def stop(self):
        if self.poller is not None:
            self.poller.stop()
