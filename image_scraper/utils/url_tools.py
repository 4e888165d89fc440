import base64
import re
from typing import Optional
from urllib.parse import quote, unquote_to_bytes

from urllib3.exceptions import LocationParseError
from urllib3.util import Url, parse_url

from ..core.errors import InvalidURLError


# Characters that never appear unescaped in a well formed URL
_DISALLOWED_CHARS = re.compile(r'[\s"<>\\^`{|}\x00-\x1f\x7f]')
_SUPPORTED_SCHEMES = ('http', 'https')


def parse_url_string(value: str) -> Optional[Url]:
    """Parse an absolute http(s) URL, returning None when it is not one."""
    if not isinstance(value, str) or not value:
        return None
    if _DISALLOWED_CHARS.search(value):
        return None
    try:
        url = parse_url(value)
    except LocationParseError:
        return None
    if url.scheme not in _SUPPORTED_SCHEMES or not url.host:
        return None
    return url


def build_search_url(base_url: str, query: str) -> str:
    try:
        # safe='' so that '/', '&' and '=' cannot leak into the query string
        search_path = quote(query, safe='')
    except (TypeError, UnicodeEncodeError):
        raise InvalidURLError(query) from None

    url = base_url + search_path
    if parse_url_string(url) is None:
        raise InvalidURLError(url)
    return url


def is_data_url(value: str) -> bool:
    """True for inline ``data:[<mediatype>][;base64],<data>`` URLs"""
    if not isinstance(value, str) or not value.startswith('data:'):
        return False
    if _DISALLOWED_CHARS.search(value):
        return False
    return ',' in value


def is_downloadable_url(value: str) -> bool:
    return is_data_url(value) or parse_url_string(value) is not None


def decode_data_url(value: str) -> bytes:
    """Return the payload of a data URL.

    Raises ValueError when the URL is malformed or its base64 payload is
    invalid.
    """
    if not is_data_url(value):
        raise ValueError(f'Not a data URL: {value[:50]!r}')

    header, encoded = value.split(',', 1)
    if header.endswith(';base64'):
        return base64.b64decode(encoded, validate=True)
    return unquote_to_bytes(encoded)
