"""
Query timing loop and latency statistics.

"""

import time
import statistics

from .common import QueryError, dprint


def std_dev(samples):
    """Population standard deviation; 0.0 for no samples"""
    if not samples:
        return 0.0
    return statistics.pstdev(samples)


class Report:
    """Final statistics of a run"""

    def __init__(self, sent, received, min, max, avg, stddev, samples):
        self.sent = sent
        self.received = received
        self.min = min
        self.max = max
        self.avg = avg
        self.stddev = stddev
        self.samples = samples

    @property
    def lost(self):
        return self.sent - self.received

    @property
    def loss_percent(self):
        if self.sent == 0:
            return 0
        return (100 * self.lost) // self.sent

    def __repr__(self):
        return "<Report: sent=%d received=%d min=%.3f avg=%.3f max=%.3f " \
            "stddev=%.3f>" % (self.sent, self.received, self.min, self.avg,
                              self.max, self.stddev)


class RunState:
    """Running aggregate of per query elapsed times (in ms). Failed
    queries count as sent but not received; their elapsed time is
    still a sample."""

    def __init__(self):
        self.max = None
        self.min = None
        self.sent = 0
        self.received = 0
        self.total = 0.0
        self.samples = []

    def addvalue(self, val, ok=True):
        self.sent += 1
        if ok:
            self.received += 1
        self.samples.append(val)
        if self.max is None:
            self.max = val
            self.min = val
        else:
            if val > self.max:
                self.max = val
            if val < self.min:
                self.min = val
        self.total += val

    def average(self):
        if self.sent == 0:
            return 0.0
        return self.total / self.sent

    def report(self):
        return Report(self.sent, self.received,
                      self.min if self.min is not None else 0.0,
                      self.max if self.max is not None else 0.0,
                      self.average(), std_dev(self.samples),
                      list(self.samples))


def elapsed_ms(t1, t2):
    """milliseconds between two timer readings, never negative"""
    return max(0.0, (t2 - t1) * 1000.0)


def run(count, client, monitor, reporter=None, timer=time.perf_counter):
    """Send count queries, one at a time, and return a Report.

    The monitor is polled before each query; once it asks to stop,
    no further query is sent and the statistics cover the queries
    made so far. A QueryError from the client is a lost query, any
    other exception ends the run.
    """

    state = RunState()

    for seq in range(count):

        if monitor.should_stop():
            dprint("signal %s, stopping before seq=%d" % (monitor.signum, seq))
            break

        result, error = None, None
        t1 = timer()
        try:
            result = client.query()
        except QueryError as e:
            error = e
        t2 = timer()
        elapsed = elapsed_ms(t1, t2)

        state.addvalue(elapsed, ok=(error is None))

        if reporter is not None:
            if error is None:
                reporter.reply(seq, elapsed, result)
            else:
                reporter.failure(seq, elapsed, error)

    return state.report()
