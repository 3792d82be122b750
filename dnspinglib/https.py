"""
DNS over HTTPS.

"""

import requests

from .common import QueryError, dprint


def checkContentLength(r):
    """
    requests library doesn't check content length!
    https://blog.petrzemek.net/2018/04/22/on-incomplete-http-reads-and-the-requests-library-in-python/
    """
    expected = r.headers.get('Content-Length')
    if expected is not None:
        actual = r.raw.tell()
        try:
            expected = int(expected)
        except ValueError:
            raise QueryError("bad Content-Length header: %s" % expected)
        if actual < expected:
            raise QueryError(
                'incomplete read ({} bytes read, {} more expected)'.format(
                    actual, expected - actual)
            )
        return


def send_request_https(message, url, timeout):
    """Send request via HTTPS, return the wire format response"""

    headers = {
        'Accept': 'application/dns-message',
        'Content-Type' : 'application/dns-message',
    }
    try:
        resp = requests.post(url, headers=headers, data=message,
                             timeout=timeout)
    except requests.Timeout:
        raise QueryError("request timed out")
    except requests.RequestException as e:
        raise QueryError("HTTPS request failed: %s" % e)
    checkContentLength(resp)
    status_code = resp.status_code
    if status_code != 200:
        dprint("HTTP response headers: %s" % resp.headers)
        raise QueryError("HTTP response code {}".format(status_code))
    return resp.content
