import sys, socket, getopt

from .common import *


OPTSTRING = "hqvds:p:P:S:c:t:w:TH:46"


def get_int(opt, value, minimum=0, maximum=None):
    """Convert an integer option argument, enforcing its bounds"""
    try:
        val = int(value)
    except ValueError:
        raise UsageError("%s: invalid number: %s" % (opt, value))
    if val < minimum:
        raise UsageError("%s: must be at least %d: %s" % (opt, minimum, value))
    if maximum is not None and val > maximum:
        raise UsageError("%s: must be at most %d: %s" % (opt, maximum, value))
    return val


def get_wait(value):
    try:
        wait = float(value)
    except ValueError:
        raise UsageError("-w: invalid wait time: %s" % value)
    if wait <= 0:
        raise UsageError("-w: wait time must be positive: %s" % value)
    return wait


def parse_args(arglist):
    """Parse command line arguments. Options must come first.
    Returns the hostname to query; everything else ends up in the
    global options dictionary."""

    try:
        optlist, rest = getopt.getopt(arglist, OPTSTRING)
    except getopt.GetoptError as e:
        raise UsageError("invalid option: %s" % e.opt)

    for (opt, arg) in optlist:

        if opt == "-h":
            print(USAGE_STRING, end='')
            sys.exit(0)

        elif opt == "-q":
            options["quiet"] = True
            options["verbose"] = False

        elif opt == "-v":
            options["verbose"] = True
            options["quiet"] = False

        elif opt == "-d":
            options["DEBUG"] = True

        elif opt == "-s":
            options["server"] = arg

        elif opt == "-p":
            options["port"] = get_int(opt, arg, minimum=1, maximum=MAX_PORT)

        elif opt == "-P":
            options["srcport"] = get_int(opt, arg, maximum=MAX_PORT)

        elif opt == "-S":
            options["srcip"] = arg

        elif opt == "-c":
            options["count"] = get_int(opt, arg)

        elif opt == "-t":
            options["qtype"] = arg.upper()

        elif opt == "-w":
            options["timeout"] = get_wait(arg)

        elif opt == "-T":
            options["use_tcp"] = True

        elif opt == "-H":
            options["https"] = True
            options["https_url"] = arg
            dprint("HTTPS URL set to: {}".format(arg))

        elif opt == "-4":
            options["af"] = socket.AF_INET

        elif opt == "-6":
            options["af"] = socket.AF_INET6

    if not rest:
        print("error: please specify a host name")
        print(USAGE_STRING, end='')
        sys.exit(0)

    if rest[1:]:
        raise UsageError("unexpected arguments: %s" % " ".join(rest[1:]))

    return rest[0]
