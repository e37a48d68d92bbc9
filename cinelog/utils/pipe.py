"""Small function-composition pipeline.

A pipe holds an initial value and an ordered list of functions. ``run``
threads the value through each function in turn, then through the
``run_last`` functions, and finally hands the result to the callback if one
was given.

Example:
    >>> Pipe([1, 2, 3]).use(lambda xs: [x * 2 for x in xs]).use(lambda xs: [x for x in xs if x > 2]).run().value()
    [4, 6]
"""

from collections.abc import Callable, Iterable
from functools import reduce
from typing import Any

Stage = Callable[[Any], Any]

_UNSET: Any = object()


class PipeResult:
    """Outcome of ``Pipe.run`` without a callback."""

    def __init__(self, pipe: "Pipe", result: Any) -> None:
        self._pipe = pipe
        self._result = result

    def map(self, fn: Stage) -> "PipeResult":
        """Transform the result without touching the pipe."""
        return PipeResult(self._pipe, fn(self._result))

    def then(self, fn: Callable[[Any], Any]) -> "Pipe":
        """Hand the result to ``fn`` and return the originating pipe."""
        fn(self._result)
        return self._pipe

    def value(self) -> Any:
        return self._result


class Pipe:
    def __init__(
        self,
        initial: Any = None,
        funcs: Iterable[Stage] = (),
        run_last: Iterable[Stage] = (),
        callback: Callable[[Any], Any] | None = None,
    ) -> None:
        self._initial = list(initial) if isinstance(initial, list) else initial
        self._funcs: list[Stage] = list(funcs)
        self._run_last: list[Stage] = list(run_last)
        self._callback = callback

    def use(self, fn: Stage) -> "Pipe":
        self._funcs.append(fn)
        return self

    def run(self, initial: Any = _UNSET) -> Any:
        """Execute the pipeline.

        Returns the callback's return value when a callback was given,
        otherwise a ``PipeResult``.
        """
        start = self._initial if initial is _UNSET else initial
        result = reduce(lambda data, fn: fn(data), [*self._funcs, *self._run_last], start)

        if self._callback is not None:
            return self._callback(result)
        return PipeResult(self, result)

    def clear(self) -> "Pipe":
        """New pipe over the same data with no functions."""
        return Pipe(self._initial)
