import os
import sys
import socket

__version__    = "1.1.0"

PROGNAME       = os.path.basename(sys.argv[0]) or "dnsping"
PROGDESC       = "DNS query latency measurement tool"

RESOLV_CONF    = "/etc/resolv.conf"    # where to find default server
DEFAULT_PORT   = 53
MAX_PORT       = 65535
DEFAULT_COUNT  = 10                    # number of queries to send
DEFAULT_TIMEOUT = 5                    # per query timeout in seconds
DEFAULT_QTYPE  = "A"
DEFAULT_URL    = 'https://cloudflare-dns.com/dns-query'


USAGE_STRING = """\
{0} ({1}), version {2}

Usage: {0} [-h] [-q] [-v] [-s server] [-p port] [-P port] [-S address]
       [-c count] [-t type] [-w wait] [-T] [-H url] [-4|-6] [-d] hostname
Options:
        -h                        show this help
        -q                        quiet
        -v                        print actual dns response
        -s server                 DNS server to use (default: system resolver)
        -p port                   DNS server port number (default: 53)
        -P port                   query source port number (default: 0)
        -S address                query source IP address
        -c count                  number of requests to send (default: 10)
        -w wait                   maximum wait time for a reply (default: 5)
        -t type                   DNS request record type (default: A)
        -T                        send queries via TCP
        -H url                    send queries via DNS over HTTPS to url
        -4                        perform queries using IPv4
        -6                        perform queries using IPv6
        -d                        request additional debugging output
""".format(PROGNAME, PROGDESC, __version__)


def dprint(input):
    if options["DEBUG"]:
        print(";; DEBUG: %s" % input, flush=True)
    return


class ErrorMessage(Exception):
    """A friendly error message."""
    name = PROGNAME
    def __str__(self):
        val = Exception.__str__(self)
        if val:
            return '%s: %s' % (self.name, val)
        else:
            return ''


class UsageError(ErrorMessage):
    """A command-line usage error."""
    def __str__(self):
        val = ErrorMessage.__str__(self)
        if val:
            return '%s\n%s' % (val, USAGE_STRING)
        else:
            return USAGE_STRING


class ResolverSetupError(ErrorMessage):
    """No usable name server: fatal before any query is sent."""
    pass


class QueryError(ErrorMessage):
    """A single query failed; the run carries on."""
    def reason(self):
        return Exception.__str__(self)


def excepthook(exc_type, exc_value, exc_traceback):
    """Print tracebacks for unexpected exceptions, not friendly errors."""
    if issubclass(exc_type, ErrorMessage):
        _ = sys.stderr.write("{}\n".format(exc_value))
    else:
        sys.__excepthook__(exc_type, exc_value, exc_traceback)


# Global dictionary of options: many options may be overridden or set in
# options.py: parse_args() by command line arguments.
options = dict(
    DEBUG=False,
    server=None,
    port=DEFAULT_PORT,
    srcip=None,
    srcport=0,
    count=DEFAULT_COUNT,
    timeout=DEFAULT_TIMEOUT,
    qtype=DEFAULT_QTYPE,
    quiet=False,
    verbose=False,
    use_tcp=False,
    https=False,
    https_url=DEFAULT_URL,
    af=socket.AF_UNSPEC,
)
