from __future__ import annotations

__all__ = ["Option"]

import typing as t
import warnings

from maybe._typing import assert_never, override
from maybe.tag import Maybe

T = t.TypeVar("T")
D = t.TypeVar("D")
R = t.TypeVar("R")


class _NotSet:
    __slots__ = ()

    @override
    def __repr__(self) -> str:
        return "<NotSet>"


_NOT_SET: t.Final[_NotSet] = _NotSet()


class Option(t.Generic[T]):
    """Immutable container that either holds exactly one non-null value or holds nothing.

    Build it with `Option.some`, `Option.none` or `Option.from_`; get the value back with one of the `unwrap*`
    methods or with `matches`, each of them makes the caller decide what happens when the option is empty.
    """

    __slots__ = ("__value",)

    @classmethod
    def none(cls) -> Option[T]:
        return cls(_NOT_SET)

    @classmethod
    def some(cls, value: T) -> Option[T]:
        if isinstance(value, _NotSet):
            msg = "can't create a populated option from an unset value"
            raise ValueError(msg, value)

        return cls(value)

    @classmethod
    def from_(cls, value: t.Optional[T]) -> Option[T]:
        """Return an empty option for `None`, populated option otherwise."""
        return cls.none() if value is None else cls.some(value)

    def __init__(self, value: t.Union[T, _NotSet]) -> None:
        if value is None:
            msg = "can't create a populated option from None, use `Option.from_` for nullable values"
            raise ValueError(msg, value)

        object.__setattr__(self, "_Option__value", value)

    @override
    def __setattr__(self, name: str, value: object) -> None:
        msg = "option is immutable"
        raise AttributeError(msg, name)

    @override
    def __delattr__(self, name: str) -> None:
        msg = "option is immutable"
        raise AttributeError(msg, name)

    @override
    def __reduce__(self) -> t.Tuple[t.Callable[..., Option[T]], t.Tuple[object, ...]]:
        # rebuilt through the factories, slots are never assigned with setattr
        return self.matches(lambda value: (type(self).some, (value,)), lambda: (type(self).none, ()))

    @override
    def __str__(self) -> str:
        return self.matches(lambda value: f"<Option[{value}]>", lambda: "<Option[]>")

    @override
    def __repr__(self) -> str:
        return self.matches(lambda value: f"Option.some({value!r})", lambda: "Option.none()")

    @override
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Option):
            return NotImplemented

        if self.is_none() or other.is_none():
            return self.is_none() and other.is_none()

        return bool(self.__value == other.__value)

    @override
    def __hash__(self) -> int:
        return self.matches(lambda value: hash((Maybe.SOME, value)), lambda: hash(Maybe.NONE))

    def __bool__(self) -> bool:
        warnings.warn(
            "truth value of an option is ambiguous, use `is_some()` or `is_none()` instead",
            RuntimeWarning,
            stacklevel=2,
        )
        return self.is_some()

    def is_(self) -> Maybe:
        return Maybe.NONE if isinstance(self.__value, _NotSet) else Maybe.SOME

    def is_none(self) -> bool:
        return self.is_() is Maybe.NONE

    def is_some(self) -> bool:
        return self.is_() is Maybe.SOME

    def is_a(self, tag: Maybe) -> bool:
        if tag is Maybe.SOME:
            return self.is_some()

        elif tag is Maybe.NONE:
            return self.is_none()

        else:
            assert_never(tag)

    def matches(self, on_some: t.Callable[[T], R], on_none: t.Callable[[], R]) -> R:
        """Call `on_some` with the held value or `on_none` without arguments and return the result of the call.

        The other extraction methods are built on top of this one.
        """
        value = self.__value
        if isinstance(value, _NotSet):
            return on_none()

        return on_some(value)

    def unwrap_or_else(self, on_none: t.Callable[[], D]) -> t.Union[T, D]:
        """Return the held value, `on_none()` is called only when the option is empty."""
        return self.matches(_identity, on_none)

    def unwrap_or(self, default: D) -> t.Union[T, D]:
        return self.unwrap_or_else(lambda: default)

    def unwrap_or_throw(self, error: BaseException) -> T:
        """Return the held value or raise the given `error` as is."""

        def throw() -> t.NoReturn:
            raise error

        return self.unwrap_or_else(throw)

    def unwrap(self) -> T:
        """Return the held value or raise `RuntimeError` when the option is empty.

        Use it only where an empty option means a bug in the calling code.
        """

        def throw() -> t.NoReturn:
            msg = "option: unwrap of empty container"
            raise RuntimeError(msg)

        return self.unwrap_or_else(throw)


def _identity(value: T) -> T:
    return value
