"""Assertion helpers and exception-swallowing wrappers."""

from __future__ import annotations

from typing import Any, Callable, TypeVar

T = TypeVar("T")
E = TypeVar("E", bound=BaseException)


class MustError(RuntimeError):
    """Raised by :func:`must` when a check fails."""


def validate(ok: bool, fmt: str, *args: Any) -> ValueError | None:
    """Return a ``ValueError`` built from ``fmt % args`` when ``ok`` is false, else None."""
    if ok:
        return None
    return ValueError(fmt % args if args else fmt)


def _message(args: tuple) -> str:
    if not args:
        return ""
    if len(args) == 1:
        return args[0] if isinstance(args[0], str) else str(args[0])
    return args[0] % args[1:]


def must(value: T, err: Any, *args: Any) -> T:
    """Return ``value`` unless ``err`` is False or an exception.

    ``args`` is an optional message: a plain string, or a format string
    followed by its arguments. Raises :class:`MustError` on failure.
    """
    if err is None:
        return value
    if isinstance(err, bool):
        if not err:
            raise MustError(_message(args) or "not ok")
        return value
    if isinstance(err, BaseException):
        message = _message(args)
        text = f"{message}: {err}" if message else str(err)
        raise MustError(text) from err
    raise MustError(
        f"must: invalid err type '{type(err).__name__}', should either be a bool or an error"
    )


def must0(err: Any, *args: Any) -> None:
    """Like :func:`must`, without a value to return."""
    must(None, err, *args)


def try_(callback: Callable[[], Any]) -> bool:
    """Call ``callback``; return False if it raised, True otherwise."""
    try:
        callback()
    except Exception:
        return False
    return True


def try_or(callback: Callable[[], T], fallback: T) -> tuple[T, bool]:
    """Return ``(callback(), True)``, or ``(fallback, False)`` if it raised."""
    try:
        return callback(), True
    except Exception:
        return fallback, False


def try_with_error_value(callback: Callable[[], Any]) -> tuple[Exception | None, bool]:
    """Return ``(None, True)`` on success, or ``(exception, False)`` if it raised."""
    try:
        callback()
    except Exception as exc:
        return exc, False
    return None, True


def try_catch(callback: Callable[[], Any], catch: Callable[[], Any]) -> None:
    """Call ``catch`` if ``callback`` raised."""
    if not try_(callback):
        catch()


def try_catch_with_error_value(
    callback: Callable[[], Any], catch: Callable[[Exception], Any]
) -> None:
    """Call ``catch`` with the exception if ``callback`` raised."""
    exc, ok = try_with_error_value(callback)
    if not ok:
        catch(exc)  # type: ignore[arg-type]


def errors_as(err: BaseException | None, error_type: type[E]) -> tuple[E | None, bool]:
    """Find the first exception of ``error_type`` in the chain of ``err``.

    The chain follows ``__cause__`` and then ``__context__``.
    """
    seen: set[int] = set()
    current = err
    while current is not None and id(current) not in seen:
        if isinstance(current, error_type):
            return current, True
        seen.add(id(current))
        current = current.__cause__ or current.__context__
    return None, False