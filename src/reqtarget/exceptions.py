"""src/reqtarget/exceptions.py

reqtarget exceptions hierarchy.

Parsing itself never raises; these are reserved for misuse of the API,
such as building a parser with an invalid configuration.
"""


class ReqtargetError(Exception):
    """Base exception for all reqtarget errors."""


class ConfigurationError(ReqtargetError, ValueError):
    """A parser was constructed with invalid options."""
