"""
Tests for the "Copied!" indicator timing.
"""

from colorpicker.feedback import COPIED_DURATION_MS, CopyFeedback


class FakeClock:
    """Mimics Tk's after/after_cancel with manual firing."""

    def __init__(self):
        self.jobs = {}
        self.next_id = 0

    def after(self, ms, fn):
        self.next_id += 1
        token = f"after#{self.next_id}"
        self.jobs[token] = (ms, fn)
        return token

    def after_cancel(self, token):
        self.jobs.pop(token)

    def fire_all(self):
        jobs, self.jobs = self.jobs, {}
        for _, fn in jobs.values():
            fn()


def _feedback(clock, events):
    return CopyFeedback(
        schedule=clock.after,
        cancel=clock.after_cancel,
        show=lambda: events.append("show"),
        hide=lambda: events.append("hide"),
    )


class TestCopyFeedback:
    """Tests for CopyFeedback."""

    def test_shows_then_hides(self):
        """Trigger should show immediately and hide when the timer fires."""
        clock, events = FakeClock(), []
        fb = _feedback(clock, events)
        fb.trigger()
        assert events == ["show"]
        assert fb.visible
        assert [ms for ms, _ in clock.jobs.values()] == [COPIED_DURATION_MS]
        clock.fire_all()
        assert events == ["show", "hide"]
        assert not fb.visible

    def test_retrigger_reschedules(self):
        """A second copy should cancel the pending hide and start a new one."""
        clock, events = FakeClock(), []
        fb = _feedback(clock, events)
        fb.trigger()
        fb.trigger()
        assert len(clock.jobs) == 1
        clock.fire_all()
        assert events == ["show", "show", "hide"]

    def test_default_duration_is_two_seconds(self):
        """The indicator stays up for 2000 ms."""
        assert COPIED_DURATION_MS == 2000

    def test_cancel_hides_and_clears_timer(self):
        """cancel() should drop the pending job and hide right away."""
        clock, events = FakeClock(), []
        fb = _feedback(clock, events)
        fb.trigger()
        fb.cancel()
        assert clock.jobs == {}
        assert events == ["show", "hide"]
        assert not fb.visible
        fb.cancel()
        assert events == ["show", "hide"]
