import os, socket

import dns.resolver

from .common import *


def get_socketparams(server, port, af, type):
    """Only the first set of parameters is used. Passing af=AF_UNSPEC prefers
    IPv6 if possible."""
    ai = socket.getaddrinfo(server, port, af, type)[0]
    family, socktype, proto, canonname, sockaddr = ai
    server_addr, port = sockaddr[0:2]
    return (server_addr, port, family, socktype)


def get_default_server(resolv_conf=RESOLV_CONF):
    """get default DNS resolver address"""
    try:
        if os.name != 'nt':
            resolver = dns.resolver.Resolver(filename=resolv_conf)
        else:
            resolver = dns.resolver.Resolver()
    except dns.resolver.NoResolverConfiguration as e:
        raise ResolverSetupError("no name servers found (%s)" % e)
    nameservers = [str(ns) for ns in resolver.nameservers]
    if not nameservers:
        raise ResolverSetupError("no name servers found")
    dprint("default name servers: %s" % ", ".join(nameservers))
    return nameservers[0]
