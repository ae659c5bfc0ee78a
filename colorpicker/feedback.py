"""Transient "Copied!" indicator."""

COPIED_TEXT = 'Copied!'
COPIED_DURATION_MS = 2000


class CopyFeedback:
    """Show an indicator and hide it again after `duration_ms`.

    `schedule(ms, fn)` / `cancel(token)` are the toolkit's timer functions
    (Tk's `after` and `after_cancel`). Triggering again while visible restarts
    the countdown.
    """

    def __init__(self, schedule, cancel, show, hide, duration_ms: int = COPIED_DURATION_MS):
        self._schedule = schedule
        self._cancel = cancel
        self._show = show
        self._hide = hide
        self.duration_ms = duration_ms
        self._pending = None

    @property
    def visible(self) -> bool:
        return self._pending is not None

    def trigger(self):
        if self._pending is not None:
            self._cancel(self._pending)
        self._show()
        self._pending = self._schedule(self.duration_ms, self._expire)

    def _expire(self):
        self._pending = None
        self._hide()

    def cancel(self):
        """Drop a pending hide and hide now, e.g. when the window closes."""
        if self._pending is not None:
            self._cancel(self._pending)
            self._expire()
