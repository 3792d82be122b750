import sys

from .common import *
from .options import parse_args
from .util import get_default_server
from .query import DNSClient
from .report import Reporter
from .signals import SignalMonitor
from .stats import run


def main(args):

    """ main function"""

    sys.excepthook = excepthook

    hostname = parse_args(args[1:])

    if options["https"]:
        server = None
        https_url = options["https_url"]
    else:
        server = options["server"] or get_default_server()
        https_url = None

    client = DNSClient(hostname, options["qtype"], server,
                       port=options["port"], family=options["af"],
                       timeout=options["timeout"], srcip=options["srcip"],
                       srcport=options["srcport"], use_tcp=options["use_tcp"],
                       https_url=https_url)

    reporter = Reporter(client.server, quiet=options["quiet"],
                        verbose=options["verbose"])

    monitor = SignalMonitor()
    monitor.install()

    reporter.banner(hostname, client.port, client.qtype_text)
    report = run(options["count"], client, monitor, reporter)
    reporter.summary(report)
    dprint(repr(report))

    return 0
