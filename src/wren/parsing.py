"""URL text parsing — paths, query strings, and matrix parameters.

Pure functions over plain strings. Malformed-but-parseable input never
raises: a missing delimiter or an empty segment yields an empty result.

Parameter maps are plain ``dict[str, list[str]]``. Keys keep first-seen
order, values keep occurrence order, and repeated keys append::

    >>> resolve_query_parameters("https://example.com/search?n=1&n=2&q=x")
    {'n': ['1', '2'], 'q': ['x']}
    >>> resolve_matrix_parameters("https://example.com/cars;color=red;year=2012")
    {'color': ['red'], 'year': ['2012']}
"""

import codecs
import re
from collections.abc import Iterable
from urllib.parse import quote_plus, unquote_plus

from wren.config import DEFAULT_CONFIG

_SLASH_RUN = re.compile(r"/{2,}")


def normalize_path(path: str | None) -> str | None:
    """Unify path separators and collapse repeated slashes.

    Backslashes become forward slashes, then every run of two or more
    slashes collapses into one. A leading or trailing slash survives::

        >>> normalize_path("//\\\\abc///")
        '/abc/'
    """
    if not path:
        return path
    return _SLASH_RUN.sub("/", path.replace("\\", "/"))


def resolve_query_parameters(url: str | None) -> dict[str, list[str]]:
    """Return the parameters of the query string in *url*.

    Everything after the first ``?`` up to an optional ``#fragment`` is
    split on ``&``, and each piece on its first ``=``.
    """
    if not url:
        return {}
    _, sep, query = url.partition("?")
    if not sep:
        return {}
    query = query.partition("#")[0]
    return _accumulate(query.split("&"))


def resolve_matrix_parameters(url: str | None) -> dict[str, list[str]]:
    """Return the matrix parameters of every path segment in *url*.

    A segment ``cars;color=red;year=2012`` contributes ``color`` and
    ``year``. The query string and fragment are not part of the path.
    """
    if not url:
        return {}
    path = re.split(r"[?#]", url, maxsplit=1)[0]
    if ";" not in path:
        return {}
    pieces: list[str] = []
    for segment in path.split("/"):
        # The first piece is the segment name itself
        pieces.extend(segment.split(";")[1:])
    return _accumulate(pieces)


def build_matrix_string(name: str, *values: object) -> str:
    """Build ``;name=value`` for each value, in argument order.

    >>> build_matrix_string("n", "1", "2")
    ';n=1;n=2'
    """
    return "".join(f";{name}={value}" for value in values)


def encode(value: str, encoding: str | None = None) -> str:
    """Form-encode *value* (spaces become ``+``).

    Raises ``LookupError`` for an unknown *encoding*.
    """
    return quote_plus(value, encoding=_codec_name(encoding))


def decode(value: str, encoding: str | None = None) -> str:
    """Reverse :func:`encode`."""
    return unquote_plus(value, encoding=_codec_name(encoding))


def _codec_name(encoding: str | None) -> str:
    # unquote skips the codec entirely when there is nothing to decode
    return codecs.lookup(encoding or DEFAULT_CONFIG.encoding).name


def _accumulate(pieces: Iterable[str]) -> dict[str, list[str]]:
    parameters: dict[str, list[str]] = {}
    for piece in pieces:
        name, sep, value = piece.partition("=")
        if not sep or not name:
            continue
        parameters.setdefault(name, []).append(value)
    return parameters
