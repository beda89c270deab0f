"""
Module containing URL and response helpers shared by services and resources.
"""

import logging
from urllib.parse import urlencode, urlsplit

import dateutil.parser


logger = logging.getLogger(__name__)


def _query_value(value):
    # The OpenStack APIs expect lower-case booleans
    if isinstance(value, bool):
        return "true" if value else "false"
    return value


def build_url(base_url, path = None, query = None):
    """
    Returns the URL formed by appending the path segment to the path of the base URL
    and replacing the query string with the given query pairs.
    """
    parts = urlsplit(str(base_url))
    url_path = parts.path
    if path:
        url_path = url_path.rstrip("/") + "/" + str(path).lstrip("/")
    query_string = ""
    if query:
        pairs = []
        for key, value in query.items():
            # Pairs without a value are left out
            if value is None:
                continue
            if isinstance(value, (list, tuple)):
                pairs.extend((key, _query_value(v)) for v in value)
            else:
                pairs.append((key, _query_value(value)))
        query_string = urlencode(pairs)
    url = parts._replace(path = url_path, query = query_string, fragment = "").geturl()
    logger.debug(f"built url '{url}'")
    return url


def decode_body(response):
    """
    Returns the decoded JSON body of the response, or ``None`` if there is no body.
    """
    if response.status_code == 204 or not response.content:
        return None
    return response.json()


def parse_timestamp(value):
    """
    Parses an API timestamp into a datetime, passing ``None`` through.
    """
    return dateutil.parser.parse(value) if value else None
