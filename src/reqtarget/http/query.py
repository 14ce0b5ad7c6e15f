"""src/reqtarget/http/query.py

Decoded query parameters for reqtarget.
"""

from typing import Any, Dict, Iterator, List, Mapping, Optional, Tuple, Union

__all__ = ["QueryParams", "QueryValue"]

# A key seen once maps to a str; seen more than once, to a list of every value.
QueryValue = Union[str, List[str]]


class QueryParams(Mapping[str, QueryValue]):
    """
    Insertion-ordered mapping of decoded query keys to decoded values.

    A key keeps a plain string value until it appears a second time, at
    which point the value becomes a list holding every occurrence in order.
    Use get_all() when a list is wanted regardless of how often the key
    appeared.
    """

    __slots__ = ("_params",)

    def __init__(self, params: Optional[Mapping[str, QueryValue]] = None):
        self._params: Dict[str, QueryValue] = {}
        if params:
            for k, v in params.items():
                if isinstance(v, list):
                    self._params[k] = list(v)
                else:
                    self._params[k] = v

    def _add(self, key: str, value: str) -> None:
        """Record one occurrence of key, upgrading to a list on repeats."""
        current = self._params.get(key)
        if current is None:
            self._params[key] = value
        elif isinstance(current, list):
            current.append(value)
        else:
            self._params[key] = [current, value]

    def __getitem__(self, key: str) -> QueryValue:
        return self._params[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._params)

    def __len__(self) -> int:
        return len(self._params)

    def __repr__(self) -> str:
        return f"QueryParams({self._params!r})"

    def get_all(self, key: str) -> List[str]:
        """
        Get every value of a parameter.

        Args:
            key: Decoded parameter name.

        Returns:
            List of values in order of appearance, empty list if not found.
        """
        value = self._params.get(key)
        if value is None:
            return []
        if isinstance(value, list):
            return list(value)
        return [value]

    def get_first(self, key: str, default: Any = None) -> Any:
        """First value of a parameter, or default if not found."""
        value = self._params.get(key)
        if value is None:
            return default
        if isinstance(value, list):
            return value[0]
        return value

    def is_multi(self, key: str) -> bool:
        """Whether key appeared more than once."""
        return isinstance(self._params.get(key), list)

    def items_flat(self) -> List[Tuple[str, str]]:
        """All key-value pairs, one per occurrence, grouped by key."""
        return [(k, v) for k in self._params for v in self.get_all(k)]
