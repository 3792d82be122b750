"""
Query routines.

One DNSClient is set up per run and then asked to perform a single,
synchronous query per sequence slot. Packet construction, parsing and
transport are handled by dnspython (UDP/TCP) or by the https module.
"""

import socket

import dns.exception
import dns.inet
import dns.message
import dns.name
import dns.query
import dns.rcode
import dns.rdataclass
import dns.rdatatype

from .common import *
from .util import get_socketparams
from .https import send_request_https


class QueryResult:
    """Outcome of one successful exchange"""

    def __init__(self, message, size, qtype):
        self.message = message
        self.size = size
        self.rcode = dns.rcode.to_text(message.rcode())
        self.answers = sorted(answer_lines(message, qtype))

    def __repr__(self):
        return "<QueryResult: %d bytes, rcode=%s, %d answers>" % \
            (self.size, self.rcode, len(self.answers))


def answer_lines(message, qtype):
    """text lines of answer section records of the given type"""
    lines = []
    for rrset in message.answer:
        if rrset.rdtype == qtype:
            lines.extend(rrset.to_text().splitlines())
    return lines


class DNSClient:
    """Sends queries for a fixed name and type to a fixed server"""

    def __init__(self, qname, qtype, server, port=DEFAULT_PORT,
                 family=socket.AF_UNSPEC, timeout=DEFAULT_TIMEOUT,
                 srcip=None, srcport=0, use_tcp=False, https_url=None):

        try:
            self.qtype = dns.rdatatype.from_text(qtype)
        except dns.rdatatype.UnknownRdatatype:
            raise UsageError("invalid query type: {}".format(qtype))

        try:
            self.qname = dns.name.from_text(qname)
        except dns.exception.DNSException as e:
            raise UsageError("invalid hostname: %s (%s)" % (qname, e))

        self.qtype_text = dns.rdatatype.to_text(self.qtype)
        self.timeout = timeout
        self.srcip = srcip
        self.srcport = srcport
        self.use_tcp = use_tcp
        self.https_url = https_url

        if https_url:
            self.server = https_url
            self.server_addr, self.port = None, None
            return

        if not 0 <= srcport <= MAX_PORT:
            raise ResolverSetupError("bad source port: %s" % srcport)

        if srcip:
            try:
                src_family = dns.inet.af_for_address(srcip)
            except ValueError:
                raise ResolverSetupError("bad source address: %s" % srcip)
            if family not in (socket.AF_UNSPEC, src_family):
                raise ResolverSetupError(
                    "source address %s does not match address family" % srcip)
            family = src_family

        socktype = socket.SOCK_STREAM if use_tcp else socket.SOCK_DGRAM
        try:
            self.server_addr, self.port, self.family, _ = \
                get_socketparams(server, port, family, socktype)
        except (socket.gaierror, UnicodeError) as e:
            raise ResolverSetupError("bad server: %s (%s)" % (server, e))
        self.server = server
        dprint("using server %s port %d" % (self.server_addr, self.port))

    def make_request(self):
        return dns.message.make_query(self.qname, self.qtype,
                                      dns.rdataclass.IN)

    def query(self):
        """Perform one query; raises QueryError on any failure"""

        request = self.make_request()
        try:
            if self.https_url:
                wire = send_request_https(request.to_wire(), self.https_url,
                                          self.timeout)
                response = dns.message.from_wire(wire)
                size = len(wire)
            else:
                if self.use_tcp:
                    send = dns.query.tcp
                else:
                    send = dns.query.udp
                response = send(request, self.server_addr,
                                timeout=self.timeout, port=self.port,
                                source=self.srcip, source_port=self.srcport)
                size = len(response.to_wire())
        except dns.exception.Timeout:
            raise QueryError("request timed out")
        except dns.exception.DNSException as e:
            raise QueryError("bad response: %s" % e)
        except OSError as e:
            raise QueryError("socket error: %s" % e)

        if not request.is_response(response):
            raise QueryError("response does not match query")
        dprint("response id=%d rcode=%s" %
               (response.id, dns.rcode.to_text(response.rcode())))
        return QueryResult(response, size, self.qtype)
