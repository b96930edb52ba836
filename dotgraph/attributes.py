from typing import Any, Dict, Iterator, Mapping, MutableMapping, Optional


class _Unset:
    """Marker value that removes an attribute when it is set."""

    _instance: Optional["_Unset"] = None

    def __new__(cls) -> "_Unset":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False


UNSET = _Unset()


def is_unset(value: Any) -> bool:
    return value is None or value is UNSET


class AttributeList(MutableMapping[str, Any]):
    """AttributeList is an ordered set of DOT attributes.

    Keys are unique and keep the position of their first insertion, so
    updating an existing key does not move it. Assigning ``UNSET`` (or
    ``None``) to a key removes it.
    """

    def __init__(self, attrs: Optional[Mapping[str, Any]] = None, **kwargs: Any):
        self._attrs: Dict[str, Any] = {}
        if attrs is not None:
            self.update(attrs)
        self.update(kwargs)

    def __getitem__(self, key: str) -> Any:
        return self._attrs[key]

    def __setitem__(self, key: str, value: Any) -> None:
        if is_unset(value):
            self._attrs.pop(key, None)
        else:
            self._attrs[str(key)] = value

    def __delitem__(self, key: str) -> None:
        del self._attrs[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._attrs)

    def __len__(self) -> int:
        return len(self._attrs)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, AttributeList):
            return list(self.items()) == list(other.items())
        if isinstance(other, Mapping):
            return self._attrs == dict(other)
        return NotImplemented

    def __repr__(self) -> str:
        return f"AttributeList({self._attrs!r})"

    def prepend(self, key: str, value: Any) -> None:
        """Put ``key`` in front of every other attribute."""
        rest = {k: v for k, v in self._attrs.items() if k != key}
        self._attrs = {}
        self[key] = value
        self._attrs.update(rest)
