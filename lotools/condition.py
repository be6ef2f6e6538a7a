"""Expression-style conditionals: ternaries, if/else chains and switch/case."""

from __future__ import annotations

from typing import Callable, Generic, TypeVar

T = TypeVar("T")
R = TypeVar("R")


def ternary(condition: bool, if_output: T, else_output: T) -> T:
    """Return ``if_output`` when ``condition`` holds, otherwise ``else_output``."""
    return if_output if condition else else_output


def ternary_f(condition: bool, if_func: Callable[[], T], else_func: Callable[[], T]) -> T:
    """Call and return ``if_func`` when ``condition`` holds, otherwise ``else_func``."""
    return if_func() if condition else else_func()


class IfElse(Generic[T]):
    """A chain of conditions whose first match decides the result."""

    __slots__ = ("_result", "_done")

    def __init__(self, result: T | None = None, done: bool = False) -> None:
        self._result = result
        self._done = done

    def else_if(self, condition: bool, result: T) -> IfElse[T]:
        """Take ``result`` if nothing matched yet and ``condition`` holds."""
        if not self._done and condition:
            self._result = result
            self._done = True
        return self

    def else_if_f(self, condition: bool, result_f: Callable[[], T]) -> IfElse[T]:
        """Like :meth:`else_if`, computing the result lazily."""
        if not self._done and condition:
            self._result = result_f()
            self._done = True
        return self

    def else_(self, result: T) -> T:
        """Finish the chain, falling back to ``result``."""
        return self._result if self._done else result  # type: ignore[return-value]

    def else_f(self, result_f: Callable[[], T]) -> T:
        """Finish the chain, falling back to the value of ``result_f``."""
        return self._result if self._done else result_f()  # type: ignore[return-value]


def if_(condition: bool, result: T) -> IfElse[T]:
    """Start a conditional chain."""
    return IfElse(result, True) if condition else IfElse()


def if_f(condition: bool, result_f: Callable[[], T]) -> IfElse[T]:
    """Start a conditional chain whose first result is computed lazily."""
    return IfElse(result_f(), True) if condition else IfElse()


class SwitchCase(Generic[T, R]):
    """A functional switch: the first case equal to the predicate wins."""

    __slots__ = ("_predicate", "_result", "_done")

    def __init__(self, predicate: T) -> None:
        self._predicate = predicate
        self._result: R | None = None
        self._done = False

    def case(self, value: T, result: R) -> SwitchCase[T, R]:
        """Match ``value`` against the predicate."""
        if not self._done and self._predicate == value:
            self._result = result
            self._done = True
        return self

    def case_f(self, value: T, callback: Callable[[], R]) -> SwitchCase[T, R]:
        """Match ``value``, computing the result lazily."""
        if not self._done and self._predicate == value:
            self._result = callback()
            self._done = True
        return self

    def default(self, result: R) -> R:
        """Finish the switch, falling back to ``result``."""
        if not self._done:
            self._result = result
        return self._result  # type: ignore[return-value]

    def default_f(self, callback: Callable[[], R]) -> R:
        """Finish the switch, falling back to the value of ``callback``."""
        if not self._done:
            self._result = callback()
        return self._result  # type: ignore[return-value]


def switch(predicate: T) -> SwitchCase:
    """Start a switch on ``predicate``."""
    return SwitchCase(predicate)