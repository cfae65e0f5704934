"""Result type for explicit error handling.

Provides a Result[T, E] type with Ok and Err variants so that fallible
operations return their failure as a value instead of raising it.

Usage:
    def parse_port(raw: str) -> Result[int, ValueError]:
        try:
            return Ok(int(raw))
        except ValueError as e:
            return Err(e)

    port = parse_port(raw).and_then(check_range).unwrap_or(8080)

Code that raises, or returns an awaitable that may fail, is adapted with
``Result.from_`` and ``Result.wrap``:

    result = Result.from_(lambda: json.loads(payload))
    result = await Result.from_(lambda: client.fetch(url))

    @Result.wrap
    async def fetch(url: str) -> bytes: ...
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from functools import wraps
from inspect import isawaitable, iscoroutinefunction
from typing import TYPE_CHECKING, Any, Literal, NoReturn, TypedDict, final, overload

from oxi_result.errors import UnwrapError
from oxi_result.rendering import DEFAULT_SETTINGS, RenderSettings, render_payload

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable, Coroutine

logger = logging.getLogger(__name__)

UNWRAP_MESSAGE = "called `Result.unwrap()` on an `Err` value"
UNWRAP_ERR_MESSAGE = "called `Result.unwrap_err()` on an `Ok` value"


class OkDict(TypedDict):
    ok: Literal[True]
    value: Any


class ErrDict(TypedDict):
    ok: Literal[False]
    error: Any


def _always_true(_: object) -> bool:
    return True


def _always_false(_: object) -> bool:
    return False


def _identity[V](value: V) -> V:
    return value


def _noop(_: object) -> None:
    return None


def _fail(message: str, cause: object) -> NoReturn:
    if isinstance(cause, BaseException):
        raise UnwrapError(message, cause) from cause
    raise UnwrapError(message, cause)


class Result[T, E](ABC):
    """Either a success value (Ok) or a failure value (Err).

    Subclassed by exactly two final variants. Everything except ``match`` is
    implemented here in terms of ``match``.
    """

    __slots__ = ()

    @abstractmethod
    def match[U](self, on_ok: Callable[[T], U], on_err: Callable[[E], U]) -> U:
        """Calls on_ok with the value of an Ok or on_err with the error of an Err."""

    # Construction helpers

    @overload
    @staticmethod
    def from_[U](fn: Callable[[], Awaitable[U]]) -> Coroutine[Any, Any, Result[U, Exception]]: ...

    @overload
    @staticmethod
    def from_[U](fn: Callable[[], U]) -> Result[U, Exception]: ...

    @staticmethod
    def from_(fn: Callable[[], Any]) -> Any:
        """Runs fn and captures its outcome as a Result.

        A normal return becomes Ok, a raised exception becomes Err. When fn returns
        an awaitable, a coroutine is returned instead which resolves to Ok with the
        awaited value or to Err with the exception it raised; it never raises an
        Exception itself. BaseException signals such as cancellation propagate.
        """
        try:
            value = fn()
        except Exception as e:
            logger.debug("Captured %s raised by %r", type(e).__name__, fn)
            return Err(e)
        if isawaitable(value):
            return _settle(value)
        return Ok(value)

    @overload
    @staticmethod
    def wrap[**P, U](fn: Callable[P, Awaitable[U]]) -> Callable[P, Coroutine[Any, Any, Result[U, Exception]]]: ...

    @overload
    @staticmethod
    def wrap[**P, U](fn: Callable[P, U]) -> Callable[P, Result[U, Exception]]: ...

    @staticmethod
    def wrap[**P](fn: Callable[P, Any]) -> Callable[P, Any]:
        """Lifts fn into a function with the same parameters that returns a Result.

        Calling the wrapper is equivalent to ``Result.from_(lambda: fn(*args, **kwargs))``.
        Coroutine functions are wrapped by a coroutine function.
        """
        if iscoroutinefunction(fn):

            @wraps(fn)
            async def async_wrapper(*args: P.args, **kwargs: P.kwargs) -> Result[Any, Exception]:
                outcome = Result.from_(lambda: fn(*args, **kwargs))
                if isawaitable(outcome):
                    return await outcome
                return outcome

            return async_wrapper

        @wraps(fn)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> Any:
            return Result.from_(lambda: fn(*args, **kwargs))

        return wrapper

    # Queries

    def is_ok(self) -> bool:
        """Returns True if this is an Ok result."""
        return self.match(_always_true, _always_false)

    def is_ok_and(self, predicate: Callable[[T], bool]) -> bool:
        """Returns True if this is an Ok whose value satisfies predicate."""
        return self.match(predicate, _always_false)

    def is_err(self) -> bool:
        """Returns True if this is an Err result."""
        return self.match(_always_false, _always_true)

    def is_err_and(self, predicate: Callable[[E], bool]) -> bool:
        """Returns True if this is an Err whose error satisfies predicate."""
        return self.match(_always_false, predicate)

    # Transforms

    def map[U](self, fn: Callable[[T], U]) -> Result[U, E]:
        """Applies fn to the contained value, leaving an Err untouched."""
        return self.match(lambda value: Ok(fn(value)), lambda error: Err(error))

    def map_err[F](self, fn: Callable[[E], F]) -> Result[T, F]:
        """Applies fn to the contained error, leaving an Ok untouched."""
        return self.match(lambda value: Ok(value), lambda error: Err(fn(error)))

    def map_or[U](self, default: U, fn: Callable[[T], U]) -> U:
        """Returns fn(value) for an Ok, otherwise the already computed default."""
        return self.match(fn, lambda _: default)

    def map_or_else[U](self, default_fn: Callable[[], U], fn: Callable[[T], U]) -> U:
        """Returns fn(value) for an Ok, otherwise default_fn()."""
        return self.match(fn, lambda _: default_fn())

    def inspect(self, fn: Callable[[T], object]) -> Result[T, E]:
        """Calls fn with the contained value, if any, and returns self."""
        self.match(fn, _noop)
        return self

    def inspect_err(self, fn: Callable[[E], object]) -> Result[T, E]:
        """Calls fn with the contained error, if any, and returns self."""
        self.match(_noop, fn)
        return self

    # Combinators

    def and_[U](self, other: Result[U, E]) -> Result[U, E]:
        """Returns other if this is Ok, otherwise this error."""
        return self.match(lambda _: other, lambda error: Err(error))

    def and_then[U](self, fn: Callable[[T], Result[U, E]]) -> Result[U, E]:
        """Returns fn(value) if this is Ok, otherwise this error without calling fn."""
        return self.match(fn, lambda error: Err(error))

    def or_[F](self, other: Result[T, F]) -> Result[T, F]:
        """Returns this value if this is Ok, otherwise other."""
        return self.match(lambda value: Ok(value), lambda _: other)

    def or_else[F](self, fn: Callable[[E], Result[T, F]]) -> Result[T, F]:
        """Returns fn(error) if this is Err, otherwise this value without calling fn."""
        return self.match(lambda value: Ok(value), fn)

    # Extraction

    def expect(self, message: str) -> T:
        """Returns the contained value or raises UnwrapError with message."""
        return self.match(_identity, lambda error: _fail(message, error))

    def unwrap(self) -> T:
        """Returns the contained value or raises UnwrapError."""
        return self.expect(UNWRAP_MESSAGE)

    def unwrap_or(self, default: T) -> T:
        """Returns the contained value, or default for an Err."""
        return self.match(_identity, lambda _: default)

    def unwrap_or_else(self, fn: Callable[[E], T]) -> T:
        """Returns the contained value, or fn(error) for an Err."""
        return self.match(_identity, fn)

    def expect_err(self, message: str) -> E:
        """Returns the contained error or raises UnwrapError with message."""
        return self.match(lambda value: _fail(message, value), _identity)

    def unwrap_err(self) -> E:
        """Returns the contained error or raises UnwrapError."""
        return self.expect_err(UNWRAP_ERR_MESSAGE)

    # Interop

    def to_dict(self) -> OkDict | ErrDict:
        """Projects this result onto a plain dict that generic encoders understand."""
        return self.match(
            lambda value: OkDict(ok=True, value=value),
            lambda error: ErrDict(ok=False, error=error),
        )

    def render(self, settings: RenderSettings = DEFAULT_SETTINGS) -> str:
        """Renders ``Ok(<json>)`` or ``Err(<json>)`` with the given encoder settings."""
        return self.match(
            lambda value: f"Ok({render_payload(value, settings)})",
            lambda error: f"Err({render_payload(error, settings)})",
        )

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return self.match(lambda value: f"Ok({value!r})", lambda error: f"Err({error!r})")


@final
@dataclass(frozen=True, slots=True, repr=False)
class Ok[T, E](Result[T, E]):
    """Represents a successful result containing a value."""

    _value: T

    def match[U](self, on_ok: Callable[[T], U], on_err: Callable[[E], U]) -> U:
        return on_ok(self._value)


@final
@dataclass(frozen=True, slots=True, repr=False)
class Err[T, E](Result[T, E]):
    """Represents a failed result containing an error."""

    _error: E

    def match[U](self, on_ok: Callable[[T], U], on_err: Callable[[E], U]) -> U:
        return on_err(self._error)


async def _settle[T](pending: Awaitable[T]) -> Result[T, Exception]:
    try:
        value = await pending
    except Exception as e:
        logger.debug("Captured %s from awaitable %r", type(e).__name__, pending)
        return Err(e)
    return Ok(value)


def json_default(obj: object) -> object:
    """``default`` hook for ``json.dumps`` that serializes results as plain dicts.

    Usage:
        json.dumps({"user": fetch_user()}, default=json_default)
    """
    if isinstance(obj, Result):
        return obj.to_dict()
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


from_ = Result.from_
wrap = Result.wrap
