"""
dnspinglib is a library of routines used by dnsping - a python script
to measure the round-trip latency of DNS queries sent to a resolver,
in the same way that ping measures ICMP echo latency.

Usage:

        dnsping [list of options] <hostname>

Options:

        -h                        print program usage information
        -q                        quiet, only print the summary
        -v                        print the answer records of each response
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

Example usage:

       dnsping www.example.com
       dnsping -c 5 -s 8.8.8.8 www.example.com
       dnsping -t MX -v example.com
       dnsping -T -s 1.1.1.1 -c 100 -q example.com
       dnsping -H https://cloudflare-dns.com/dns-query example.com

Statistics:

        Every query is timed with a monotonic clock. Queries that fail
        (timeouts, network errors, HTTP errors) are counted as lost but
        their elapsed time is still part of the min/avg/max/stddev
        figures. The standard deviation is the population one.

        The "bytes" figure of a UDP or TCP reply is the length of the
        response as dnspython encodes it again after parsing, which
        can differ from what the server sent if it compressed names
        differently. Over HTTPS it is the size of the received body.

        The first SIGINT, SIGTERM or SIGHUP stops the run after the
        query in progress and prints the summary. A second one exits
        at once without a summary.

Pre-requisites:

        Python 3.8 (or later), dnspython, requests

#
# Copyright (C) 2006 - 2015, Shumon Huque
#
# This is free software; you can redistribute it and/or modify it
# under the terms of the GNU General Public License as published by
# the Free Software Foundation; either version 2, or (at your option)
# any later version.
#
# dnsping is distributed in the hope that it will be useful, but
# WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the GNU
# General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program. If not, write to the Free Software Foundation,
# Inc., 51 Franklin Street, Fifth Floor, Boston, MA 02110-1301, USA.
#
"""
