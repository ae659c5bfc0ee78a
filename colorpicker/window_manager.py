"""Keep at most one picker window alive."""
from colorpicker.debug import debug_log


class WindowManager:
    """Single-slot registry for the picker window.

    `factory(on_close)` must build and show a window and call `on_close()` when
    that window goes away. The returned handle needs `bring_to_front()` and `close()`.
    """

    def __init__(self, factory):
        self._factory = factory
        self._window = None

    def is_open(self) -> bool:
        return self._window is not None

    @property
    def window(self):
        return self._window

    def open(self):
        if self._window is not None:
            self._window.bring_to_front()
            return self._window
        window = None

        def on_close():
            # a stale close from an older window must not clear a newer one
            if self._window is window:
                self._window = None
                debug_log('picker window closed')

        window = self._factory(on_close)
        self._window = window
        debug_log('picker window opened')
        return window

    def close(self):
        if self._window is not None:
            self._window.close()
