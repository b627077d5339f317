"""
One-shot Scheduling

Cancellable delayed calls. The password-reset flow arms one of these after a
successful reset and cancels it when the flow is disposed.
"""

import threading


class TimerHandle:
    """Handle for a scheduled call."""

    def __init__(self, delay, callback, args=()):
        self.delay = delay
        self.callback = callback
        self.args = args
        self.cancelled = False
        self.fired = False

    def cancel(self):
        self.cancelled = True

    @property
    def pending(self):
        return not (self.cancelled or self.fired)

    def fire(self):
        if not self.pending:
            return
        self.fired = True
        self.callback(*self.args)


class ThreadingScheduler:
    """Runs each scheduled call on a ``threading.Timer``."""

    def call_later(self, delay, callback, *args):
        handle = _ThreadedHandle(delay, callback, args)
        handle.start()
        return handle


class _ThreadedHandle(TimerHandle):
    def __init__(self, delay, callback, args=()):
        super().__init__(delay, callback, args)
        self._timer = threading.Timer(delay, self.fire)
        self._timer.daemon = True

    def start(self):
        self._timer.start()

    def cancel(self):
        super().cancel()
        self._timer.cancel()


class PageScheduler:
    """
    Scheduler whose delayed calls run in the browser.

    Nothing fires server-side; the template renders the recorded handle as a
    page-scoped redirect, which the browser drops when the page is left.
    """

    def __init__(self):
        self.handles = []

    def call_later(self, delay, callback, *args):
        handle = TimerHandle(delay, callback, args)
        self.handles.append(handle)
        return handle

    @property
    def pending(self):
        return [handle for handle in self.handles if handle.pending]
