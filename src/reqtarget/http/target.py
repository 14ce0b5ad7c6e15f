"""src/reqtarget/http/target.py

Request-target parser for reqtarget.

Splits the path, query and fragment portion of an HTTP request line
(``/users?sort=desc#top``) into a verbatim path and decoded query
parameters. Parsing is total: any ``str`` input yields a result.
"""

import logging
from typing import Any, Iterator, Optional, Union

from reqtarget.exceptions import ConfigurationError
from reqtarget.http.query import QueryParams
from reqtarget.utils.percent import percent_decode

__all__ = ["ParsedTarget", "TargetParser", "parse_target"]

_logger = logging.getLogger(__name__)


class ParsedTarget:
    """
    Result of parsing a request-target.

    Attributes:
        path: Everything before the first ``?`` (or ``#``), not decoded.
        query: Decoded query parameters.
    """

    __slots__ = ("path", "query")

    def __init__(self, path: str, query: QueryParams):
        self.path = path
        self.query = query

    def __iter__(self) -> Iterator[Union[str, QueryParams]]:
        yield self.path
        yield self.query

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, ParsedTarget):
            return NotImplemented
        return self.path == other.path and self.query == other.query

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"ParsedTarget(path={self.path!r}, query={self.query!r})"


class TargetParser:
    """
    Request-target parser.

    Handles:
    - Fragment stripping at the first ``#``.
    - Path/query split at the first ``?``.
    - Percent-decoding of query keys and values.
    - Repeated keys, collected into lists.
    """

    __slots__ = ("plus_as_space", "max_params")

    def __init__(
        self,
        plus_as_space: bool = False,
        max_params: Optional[int] = None,
    ):
        if max_params is not None:
            if isinstance(max_params, bool) or not isinstance(max_params, int):
                raise ConfigurationError(
                    f"max_params must be an int or None, got {max_params!r}"
                )
            if max_params < 0:
                raise ConfigurationError(
                    f"max_params must not be negative, got {max_params}"
                )

        self.plus_as_space = plus_as_space
        self.max_params = max_params

    def parse(self, raw: str) -> ParsedTarget:
        """
        Parse a raw request-target.

        Args:
            raw: The request-target as received, e.g. ``/users?ids=1&ids=2``.

        Returns:
            ParsedTarget with the verbatim path and the decoded query.
        """
        hash_index = raw.find("#")
        if hash_index != -1:
            raw = raw[:hash_index]

        path, sep, search = raw.partition("?")
        query = QueryParams()
        if not sep or not search:
            return ParsedTarget(path, query)

        # A second "?" is not a separator: "/a??b=1" yields the key "?b".
        seen = 0
        for pair in search.split("&"):
            if not pair:
                continue

            if self.max_params is not None and seen >= self.max_params:
                if _logger.isEnabledFor(logging.DEBUG):
                    _logger.debug(
                        "Ignoring query parameters beyond max_params=%d",
                        self.max_params,
                    )
                break
            seen += 1

            raw_key, eq, raw_value = pair.partition("=")
            key = percent_decode(raw_key, self.plus_as_space)
            if not key:
                continue

            value = percent_decode(raw_value, self.plus_as_space) if eq else ""
            query._add(key, value)  # pylint: disable=protected-access

        return ParsedTarget(path, query)


_default_parser = TargetParser()


def parse_target(raw: str) -> ParsedTarget:
    """Parse a request-target with the default parser settings."""
    return _default_parser.parse(raw)
