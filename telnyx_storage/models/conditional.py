"""Result container for operations where an absent value is a normal outcome."""
from typing import Generic, Optional, TypeVar

T = TypeVar("T")

_MISSING = object()


class ConditionalValue(Generic[T]):
    """A value that may or may not have been produced.

    ``ConditionalValue()`` carries no value; ``ConditionalValue(x)`` carries x.
    Reading ``value`` from an empty instance returns None instead of raising,
    so check ``has_value`` (or truthiness) first.
    """

    __slots__ = ("has_value", "_value")

    def __init__(self, value=_MISSING):
        self.has_value = value is not _MISSING
        self._value = None if value is _MISSING else value

    @property
    def value(self) -> Optional[T]:
        return self._value

    def __bool__(self):
        return self.has_value

    def __eq__(self, other):
        if not isinstance(other, ConditionalValue):
            return NotImplemented
        return self.has_value == other.has_value and self._value == other._value

    def __repr__(self):
        if not self.has_value:
            return "ConditionalValue()"
        return f"ConditionalValue({self._value!r})"
