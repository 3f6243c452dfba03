from __future__ import annotations

from typing import Generic, TypeVar
from collections.abc import Callable
from dataclasses import dataclass, field

from bart.types import IllegalStateError

T = TypeVar("T")
U = TypeVar("U")
R = TypeVar("R")

_EMPTY = None


@dataclass(frozen=True, eq=True, repr=False)
class Option(Generic[T]):
    """A container that either holds a value (present) or holds nothing (absent).

    There is exactly one absent ``Option`` object, obtained through ``Option.empty()``.
    Every operation that yields an absent option returns that same object, so
    ``opt is Option.empty()`` is a valid absence test.

    Two present options are equal when their held values are equal.
    The absent option is equal only to itself.
    """
    value: T = None
    present: bool = field(default=True)

    def __post_init__(self) -> None:
        if self.present and self.value is None:
            raise ValueError("a present Option cannot hold None: use Option.ofNullable() instead")
        if not self.present and self.value is not None:
            raise ValueError(f"an absent Option cannot hold a value: {self.value}")
        if not self.present and _EMPTY is not None:
            raise ValueError("the absent Option already exists: use Option.empty() instead")

    @staticmethod
    def empty() -> Option:
        return _EMPTY

    @staticmethod
    def of(value:T) -> Option[T]:
        return Option(value, True)

    @staticmethod
    def ofNullable(value:T|None) -> Option[T]:
        return Option(value, True) if value is not None else _EMPTY

    def get(self) -> T:
        """Returns the held value.

        Raises:
            IllegalStateError: if this option is absent.
        """
        if self.present:
            return self.value
        else:
            raise IllegalStateError("Trying to get a nonexistent value.")

    def getOrNone(self) -> T|None:
        return self.value if self.present else None

    def getOrElse(self, else_value:T) -> T:
        return self.value if self.present else else_value

    def getOrCall(self, else_supplier:Callable[[],T]) -> T:
        return self.value if self.present else else_supplier()

    def is_present(self) -> bool:
        return self.present

    def is_absent(self) -> bool:
        return not self.present

    def if_present(self, call:Callable[[T],None]) -> Option[T]:
        if self.present:
            call(self.value)

        return self

    def if_absent(self, call:Callable[[],None]) -> Option[T]:
        if not self.present:
            call()

        return self

    def map(self, mapper:Callable[[T],U|None]) -> Option[U]:
        """Applies ``mapper`` to the held value and wraps the result.

        A ``None`` result yields the absent option. On the absent option
        ``mapper`` is never called.
        """
        return Option.ofNullable(mapper(self.value)) if self.present else _EMPTY

    def transform(self, target:R, mapper:Callable[[R,T],R]) -> R:
        if self.present:
            return mapper(target, self.value)
        else:
            return target

    def __reduce__(self):
        # keeps the absent option a singleton across copy/deepcopy/pickle.
        return (Option, (self.value, True)) if self.present else (Option.empty, ())

    def __repr__(self) -> str:
        return f'Option({self.value!r})' if self.present else 'Option(Empty)'

_EMPTY = Option(None, False)
