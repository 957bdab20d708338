"""Optional values: ``Some`` holds one value, ``Nothing`` holds none.

``maybe()`` sorts a raw value into one of the two. ``None`` is the only
absence marker; anything else, falsy or not, is present.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, ClassVar, Generic, Optional, TypeVar

T = TypeVar("T")
U = TypeVar("U")


class Maybe(Generic[T]):
    is_empty: ClassVar[bool]

    def map(self, f: Callable[[T], U]) -> "Maybe[U]": raise NotImplementedError
    def flat_map(self, f: Callable[[T], "Maybe[U]"]) -> "Maybe[U]": raise NotImplementedError
    def get_or_else(self, default: T) -> T: raise NotImplementedError
    def for_each(self, f: Callable[[T], object]) -> None: raise NotImplementedError


@dataclass(frozen=True)
class Some(Maybe[T]):
    value: T
    is_empty: ClassVar[bool] = False

    def map(self, f: Callable[[T], U]) -> "Maybe[U]":
        return Some(f(self.value))

    def flat_map(self, f: Callable[[T], "Maybe[U]"]) -> "Maybe[U]":
        return f(self.value)

    def get_or_else(self, default: T) -> T:
        # a stored None still falls back to the default
        return self.value if self.value is not None else default

    def for_each(self, f: Callable[[T], object]) -> None:
        f(self.value)


@dataclass(frozen=True)
class Nothing(Maybe[T]):
    is_empty: ClassVar[bool] = True

    def map(self, f: Callable[[T], U]) -> "Maybe[U]":
        return Nothing()

    def flat_map(self, f: Callable[[T], "Maybe[U]"]) -> "Maybe[U]":
        return Nothing()

    def get_or_else(self, default: T) -> T:
        return default

    def for_each(self, f: Callable[[T], object]) -> None:
        return None


def maybe(value: Optional[T]) -> Maybe[T]:
    """Wrap ``value`` in ``Some`` unless it is ``None``.

    Callers porting from a language with two absence markers (null and
    undefined) should map both to ``None`` first.
    """
    return Some(value) if value is not None else Nothing()
