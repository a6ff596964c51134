import os
import random
import sys

# Ensure project src/ is on sys.path for imports
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), os.pardir))
src_path = os.path.join(ROOT, "src")
if src_path not in sys.path:
    sys.path.insert(0, src_path)

from shop.navigator import Navigator  # noqa: E402
from utils.config import Settings  # noqa: E402

SETTINGS = Settings(splash_delay=2.0, auth_delay=1.0, search_debounce=0.3)


class ManualHandle:
    def __init__(self, when, callback, args):
        self.when = when
        self.callback = callback
        self.args = args
        self.cancelled = False

    def cancel(self):
        self.cancelled = True


class ManualScheduler:
    """Scheduler driven by advance(), so timer tests don't sleep."""

    def __init__(self):
        self.now = 0.0
        self.handles = []

    def call_later(self, delay, callback, *args):
        handle = ManualHandle(self.now + delay, callback, args)
        self.handles.append(handle)
        return handle

    @property
    def pending(self):
        return [h for h in self.handles if not h.cancelled]

    def advance(self, seconds):
        target = self.now + seconds
        while True:
            due = [h for h in self.pending if h.when <= target + 1e-9]
            if not due:
                break
            handle = min(due, key=lambda h: h.when)
            self.handles.remove(handle)
            self.now = handle.when
            handle.callback(*handle.args)
        self.now = target

    def fire_ignoring_cancel(self):
        """Run every callback ever scheduled, like a scheduler that lost the cancel."""
        handles, self.handles = self.handles, []
        for handle in handles:
            handle.callback(*handle.args)


def make_navigator():
    scheduler = ManualScheduler()
    nav = Navigator(scheduler=scheduler, config=SETTINGS, rng=random.Random(7))
    return nav, scheduler


def logged_in_navigator():
    nav, scheduler = make_navigator()
    nav.start()
    scheduler.advance(SETTINGS.splash_delay)
    nav.login("devicelab", "robustest")
    scheduler.advance(SETTINGS.auth_delay)
    assert nav.screen == "products", nav.screen
    return nav, scheduler
