"""
Request encoding helpers.

Form-style parameter encoding, URL assembly and the line-joining body reader
used by RestClient.
"""

import re
from typing import Any, Mapping, Optional
from urllib.parse import quote

from .exceptions import ParameterEncodingError
from .structs import HTTPMethod

_LINE_BREAK = re.compile(r"\r\n|\r|\n")


def encode_vars(params: Optional[Mapping[str, Any]]) -> str:
    """
    Encode parameters as "k1=v1&k2=v2".

    Values are percent-encoded as UTF-8 (space becomes %20), keys are used
    verbatim and mapping iteration order is kept. An empty or absent mapping
    encodes to "".

    Raises:
        ParameterEncodingError: If a value cannot be encoded as UTF-8
    """
    if not params:
        return ""

    pairs = []
    for key, value in params.items():
        try:
            encoded = quote(str(value), safe="", encoding="utf-8", errors="strict")
        except UnicodeError as e:
            raise ParameterEncodingError(f"Unable to encode value of parameter '{key}' as UTF-8") from e
        pairs.append(f"{key}={encoded}")
    return "&".join(pairs)


def build_url(endpoint: str, path: str, method: HTTPMethod, encoded: str) -> str:
    """
    Full request URL: endpoint + path, plus the query string for GET.

    GET appends "?encoded" when path has no "?" yet, "&encoded" otherwise.
    Nothing is appended when there are no parameters.
    """
    url = endpoint + path
    if method is HTTPMethod.GET and encoded:
        url += ("&" if "?" in path else "?") + encoded
    return url


def join_lines(text: str) -> str:
    """Concatenate the lines of text with no separator (drops \\r\\n, \\r, \\n)."""
    return _LINE_BREAK.sub("", text)
