"""
Cooperative stop handling.

The first SIGINT, SIGTERM or SIGHUP only asks the query loop to stop at
the next iteration boundary; a query already waiting for its answer is
not interrupted. A second one exits the process at once, without the
summary.
"""

import sys
import signal
import threading


RUNNING    = "RUNNING"
STOPPING   = "STOPPING"
TERMINATED = "TERMINATED"

STOP_SIGNALS = ("SIGINT", "SIGTERM", "SIGHUP")
BLOCKED_SIGNALS = ("SIGTSTP", "SIGTTOU", "SIGTTIN")


def lookup_signals(names):
    """signal numbers for the names this platform knows about"""
    return [getattr(signal, name) for name in names if hasattr(signal, name)]


class SignalMonitor:
    """Stop flag set by signal handlers, polled by the query loop"""

    def __init__(self):
        self.state = RUNNING
        self.signum = None
        self._stop = threading.Event()

    def install(self):
        blocked = lookup_signals(BLOCKED_SIGNALS)
        if blocked and hasattr(signal, "pthread_sigmask"):
            signal.pthread_sigmask(signal.SIG_BLOCK, blocked)
        for signum in lookup_signals(STOP_SIGNALS):
            signal.signal(signum, self.handler)

    def handler(self, signum, frame):
        if self._stop.is_set():
            self.state = TERMINATED
            sys.exit(0)
        self.signum = signum
        self.stop()

    def stop(self):
        self.state = STOPPING
        self._stop.set()

    def should_stop(self):
        return self._stop.is_set()
