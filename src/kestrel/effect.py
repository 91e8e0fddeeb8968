"""Effect: a deferred, dependency-injected async computation producing a Result.

An Effect[R, T, E] wraps a function from a runtime bundle R to an awaitable
Result[T, E]. Building and composing effects never runs anything; only
fork(runtime) does.

Example:
    ```python
    async def load_user(deps: Deps) -> User:
        return await deps.db.get('user-1')

    greeting = (
        Effect.from_(load_user)
        .map(lambda user: f'Hello {user.name}')
    )

    result = await greeting.fork(Deps(db=db))  # Ok('Hello Ada') or Err(exc)
    ```
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Coroutine
from typing import Any

import anyio

from kestrel._logging import get_logger
from kestrel.decorators.safe import safe_async
from kestrel.result import Err, Ok, Result

__all__ = ['Effect']

_logger = get_logger(__name__)


class Effect[R, T, E]:
    """Reader-Task-Result: R -> Awaitable[Result[T, E]].

    Effects are immutable and may be forked any number of times, each fork
    running the computation afresh against the supplied runtime.

    Note:
        There is no cancellation or timeout primitive. Wrap the awaited fork
        in anyio.fail_after() or similar when needed.
    """

    __slots__ = ('_run',)

    def __init__(self, run: Callable[[R], Awaitable[Result[T, E]]]) -> None:
        """Create an Effect from a function returning an awaitable Result.

        Args:
            run: Called with the runtime bundle on each fork.
        """
        self._run = run

    @classmethod
    def from_(cls, f: Callable[[R], Awaitable[T]]) -> Effect[R, T, Exception]:
        """Wrap an async operation, turning anything it raises into Err.

        Args:
            f: Async function receiving the runtime bundle.

        Returns:
            Effect that yields Ok(return value) or Err(exception).
        """
        return Effect(safe_async(f))

    @classmethod
    def succeed(cls, value: T) -> Effect[Any, T, Any]:
        """Effect that always yields Ok(value)."""
        return cls.from_result(Ok(value))

    @classmethod
    def fail(cls, error: E) -> Effect[Any, Any, E]:
        """Effect that always yields Err(error)."""
        return cls.from_result(Err(error))

    @classmethod
    def from_result(cls, result: Result[T, E]) -> Effect[Any, T, E]:
        """Lift an existing Result into an Effect."""

        async def _run(_runtime: Any) -> Result[T, E]:
            return result

        return Effect(_run)

    @classmethod
    def ask(cls) -> Effect[R, R, Any]:
        """Effect that yields the runtime bundle itself."""

        async def _run(runtime: R) -> Result[R, Any]:
            return Ok(runtime)

        return Effect(_run)

    def map[U](self, f: Callable[[T], U]) -> Effect[R, U, E]:
        """Transform the eventual Ok value with a sync function.

        f runs inside the effect; an exception it raises propagates out of
        fork() rather than becoming Err.
        """

        async def _mapped(runtime: R) -> Result[U, E]:
            return (await self._run(runtime)).map(f)

        return Effect(_mapped)

    def map_err[F](self, f: Callable[[E], F]) -> Effect[R, T, F]:
        """Transform the eventual Err value with a sync function."""

        async def _mapped(runtime: R) -> Result[T, F]:
            return (await self._run(runtime)).map_err(f)

        return Effect(_mapped)

    def and_then[U](self, f: Callable[[T], Effect[R, U, E]]) -> Effect[R, U, E]:
        """Sequence a second effect that depends on this one's value.

        The second effect runs against the same runtime and only after this
        one has settled with Ok; on Err it is never built nor run.
        """

        async def _chained(runtime: R) -> Result[U, E]:
            result = await self._run(runtime)
            if isinstance(result, Err):
                return result
            return await f(result.value)._run(runtime)

        return Effect(_chained)

    def zip[U](self, other: Effect[R, U, E]) -> Effect[R, tuple[T, U], E]:
        """Run both effects concurrently and pair their values.

        Returns the first Err by position (self, then other) if either fails.
        """

        async def _zipped(runtime: R) -> Result[tuple[T, U], E]:
            results: list[Any] = [None, None]

            async def run_at(index: int, effect: Effect[R, Any, E]) -> None:
                results[index] = await effect._run(runtime)

            async with anyio.create_task_group() as tg:
                tg.start_soon(run_at, 0, self)
                tg.start_soon(run_at, 1, other)

            first, second = results
            if isinstance(first, Err):
                return first
            if isinstance(second, Err):
                return second
            return Ok((first.value, second.value))

        return Effect(_zipped)

    def fork(self, runtime: R) -> Coroutine[Any, Any, Result[T, E]]:
        """Execute the effect against a concrete runtime bundle.

        Args:
            runtime: Dependencies the wrapped operations receive.

        Returns:
            Coroutine producing the final Result.
        """

        async def _forked() -> Result[T, E]:
            result = await self._run(runtime)
            if isinstance(result, Err):
                _logger.debug('effect_failed', error=repr(result.error))
            return result

        return _forked()

    def __repr__(self) -> str:
        return f'Effect({self._run!r})'
