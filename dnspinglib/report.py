"""
Output of per query lines and the final statistics.

"""

from .common import PROGNAME


class Reporter:
    """Prints what the query loop observes. Quiet mode drops the lines
    for successful queries, verbose mode adds their answer records."""

    def __init__(self, server, progname=PROGNAME, quiet=False, verbose=False,
                 out=None):
        self.server = server
        self.progname = progname
        self.quiet = quiet
        self.verbose = verbose
        self.out = out

    def write(self, line):
        print(line, file=self.out, flush=True)

    def banner(self, hostname, port, qtype):
        if port is None:
            where = self.server
        else:
            where = "%s:%d" % (self.server, port)
        self.write("%s DNS: %s, hostname: %s, rdatatype: %s" %
                   (self.progname, where, hostname, qtype))

    def reply(self, seq, elapsed, result):
        if self.quiet:
            return
        if self.verbose:
            for line in result.answers:
                self.write(line)
        self.write("%d bytes from %s: seq=%-3d time=%.3f ms" %
                   (result.size, self.server, seq, elapsed))

    def failure(self, seq, elapsed, error):
        self.write("%s from %s: seq=%-3d time=%.3f ms" %
                   (error.reason(), self.server, seq, elapsed))

    def summary(self, report):
        self.write("--- %s %s statistics ---" % (self.server, self.progname))
        self.write("%d requests transmitted, %d responses received, %d%% lost" %
                   (report.sent, report.received, report.loss_percent))
        self.write("min=%.3f ms, avg=%.3f ms, max=%.3f ms, stddev=%.3f ms" %
                   (report.min, report.avg, report.max, report.stddev))
