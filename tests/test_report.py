import io

from dnspinglib.common import QueryError
from dnspinglib.report import Reporter
from dnspinglib.stats import Report

from conftest import FakeResult


def make_reporter(**kwargs):
    out = io.StringIO()
    return Reporter("8.8.8.8", progname="dnsping", out=out, **kwargs), out


def test_reply_line():
    reporter, out = make_reporter()
    reporter.reply(0, 12.3456, FakeResult(size=48))
    reporter.reply(12, 1.0, FakeResult(size=48))
    assert out.getvalue().splitlines() == [
        "48 bytes from 8.8.8.8: seq=0   time=12.346 ms",
        "48 bytes from 8.8.8.8: seq=12  time=1.000 ms",
    ]


def test_verbose_prints_answers_first():
    reporter, out = make_reporter(verbose=True)
    reporter.reply(1, 2.0, FakeResult(size=64, answers=[
        "example.com. 300 IN A 192.0.2.1"]))
    assert out.getvalue().splitlines() == [
        "example.com. 300 IN A 192.0.2.1",
        "64 bytes from 8.8.8.8: seq=1   time=2.000 ms",
    ]


def test_quiet_suppresses_replies_not_failures():
    reporter, out = make_reporter(quiet=True)
    reporter.reply(0, 2.0, FakeResult())
    reporter.failure(1, 5000.0, QueryError("request timed out"))
    assert out.getvalue() == \
        "request timed out from 8.8.8.8: seq=1   time=5000.000 ms\n"


def test_banner():
    reporter, out = make_reporter()
    reporter.banner("example.com", 53, "AAAA")
    assert out.getvalue() == \
        "dnsping DNS: 8.8.8.8:53, hostname: example.com, rdatatype: AAAA\n"


def test_banner_without_port():
    out = io.StringIO()
    reporter = Reporter("https://dns.example/dns-query", progname="dnsping",
                        out=out)
    reporter.banner("example.com", None, "A")
    assert out.getvalue() == "dnsping DNS: https://dns.example/dns-query, " \
        "hostname: example.com, rdatatype: A\n"


def test_summary_reports_real_loss():
    reporter, out = make_reporter()
    report = Report(5, 3, 0.0, 5.0, 3.0, 2.449, [5, 0, 5, 0, 5])
    reporter.summary(report)
    assert out.getvalue().splitlines() == [
        "--- 8.8.8.8 dnsping statistics ---",
        "5 requests transmitted, 3 responses received, 40% lost",
        "min=0.000 ms, avg=3.000 ms, max=5.000 ms, stddev=2.449 ms",
    ]


def test_summary_for_empty_run():
    reporter, out = make_reporter(quiet=True)
    reporter.summary(Report(0, 0, 0.0, 0.0, 0.0, 0.0, []))
    assert out.getvalue().splitlines()[1:] == [
        "0 requests transmitted, 0 responses received, 0% lost",
        "min=0.000 ms, avg=0.000 ms, max=0.000 ms, stddev=0.000 ms",
    ]
