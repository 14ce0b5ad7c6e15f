"""src/reqtarget/__init__.py

reqtarget - HTTP request-target parsing for Python routers.

reqtarget turns the path, query and fragment portion of an HTTP request line
into a verbatim path plus decoded query parameters. It is built entirely on
Python's standard library and never raises while parsing, so it can sit on a
request hot path in front of a router.

Key Features:
    - Zero external dependencies
    - Total parsing: malformed input degrades, it never raises
    - Repeated query keys collected into ordered lists
    - UTF-8 aware percent-decoding; ``+`` kept literal unless asked
    - Full type hints (PEP 561)
    - Memory optimized with __slots__

Example:
    Default parsing::

        from reqtarget import parse_target

        target = parse_target('/users?ids=1&ids=2&sort=desc#top')
        target.path                   # '/users'
        target.query['ids']           # ['1', '2']
        target.query['sort']          # 'desc'
        target.query.get_all('sort')  # ['desc']

    HTML form decoding::

        from reqtarget import TargetParser

        parser = TargetParser(plus_as_space=True, max_params=100)
        parser.parse('/search?q=hello+world').query['q']  # 'hello world'
"""

import logging

from reqtarget.exceptions import ConfigurationError, ReqtargetError
from reqtarget.http.query import QueryParams, QueryValue
from reqtarget.http.target import ParsedTarget, TargetParser, parse_target
from reqtarget.utils.percent import percent_decode
from reqtarget.version import __version__

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "parse_target",
    "TargetParser",
    "ParsedTarget",
    "QueryParams",
    "QueryValue",
    "percent_decode",
    "ReqtargetError",
    "ConfigurationError",
    "__version__",
]
