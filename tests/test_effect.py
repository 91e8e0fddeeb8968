"""Tests for Effect: deferred, dependency-injected async computations."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field

import pytest
from kestrel import Effect, Err, Ok


@dataclass
class Deps:
    """Runtime bundle handed to fork()."""

    users: dict[str, str]
    calls: list[str] = field(default_factory=list)


@pytest.fixture
def deps() -> Deps:
    return Deps(users={'u-1': 'Ada'})


def lookup(user_id: str) -> Effect[Deps, str, Exception]:
    async def _lookup(deps: Deps) -> str:
        deps.calls.append(f'lookup:{user_id}')
        await asyncio.sleep(0)
        return deps.users[user_id]

    return Effect.from_(_lookup)


class TestEffectConstruction:
    """Tests for from_, succeed, fail, from_result, ask."""

    @pytest.mark.asyncio
    async def test_from_success(self, deps: Deps):
        """A normally completing operation yields Ok."""
        assert await lookup('u-1').fork(deps) == Ok('Ada')

    @pytest.mark.asyncio
    async def test_from_async_exception_becomes_err(self, deps: Deps):
        """Exceptions raised after suspension are caught."""
        result = await lookup('missing').fork(deps)
        assert isinstance(result, Err)
        assert isinstance(result.error, KeyError)

    @pytest.mark.asyncio
    async def test_from_sync_exception_becomes_err(self, deps: Deps):
        """Exceptions raised before any await are caught too."""

        async def boom(_deps: Deps) -> int:
            raise ValueError('bad')

        result = await Effect.from_(boom).fork(deps)
        assert isinstance(result, Err)
        assert str(result.error) == 'bad'

    @pytest.mark.asyncio
    async def test_succeed_and_fail(self):
        assert await Effect.succeed(1).fork(None) == Ok(1)
        assert await Effect.fail('no').fork(None) == Err('no')

    @pytest.mark.asyncio
    async def test_from_result(self):
        assert await Effect.from_result(Ok(3)).fork(None) == Ok(3)

    @pytest.mark.asyncio
    async def test_ask_returns_runtime(self, deps: Deps):
        assert await Effect.ask().fork(deps) == Ok(deps)

    @pytest.mark.asyncio
    async def test_construction_does_not_run(self, deps: Deps):
        """Nothing runs until fork."""
        effect = lookup('u-1').map(str.upper)
        assert deps.calls == []
        await effect.fork(deps)
        assert deps.calls == ['lookup:u-1']

    @pytest.mark.asyncio
    async def test_fork_twice_runs_twice(self, deps: Deps):
        """Effects are reusable descriptors."""
        effect = lookup('u-1')
        await effect.fork(deps)
        await effect.fork(deps)
        assert deps.calls == ['lookup:u-1', 'lookup:u-1']


class TestEffectComposition:
    """Tests for map, map_err, and_then, zip."""

    @pytest.mark.asyncio
    async def test_map(self, deps: Deps):
        assert await lookup('u-1').map(str.upper).fork(deps) == Ok('ADA')

    @pytest.mark.asyncio
    async def test_map_skips_err(self):
        assert await Effect.fail('e').map(lambda x: x + 1).fork(None) == Err('e')

    @pytest.mark.asyncio
    async def test_map_err(self):
        assert await Effect.fail('e').map_err(str.upper).fork(None) == Err('E')

    @pytest.mark.asyncio
    async def test_and_then_threads_value_and_runtime(self, deps: Deps):
        deps.users['Ada'] = 'Lovelace'
        result = await lookup('u-1').and_then(lookup).fork(deps)
        assert result == Ok('Lovelace')
        assert deps.calls == ['lookup:u-1', 'lookup:Ada']

    @pytest.mark.asyncio
    async def test_and_then_never_runs_after_failure(self, deps: Deps):
        """The second effect's operation is never invoked when the first fails."""
        started = []

        def second(_value: str) -> Effect[Deps, str, Exception]:
            async def _op(_deps: Deps) -> str:
                started.append('second')
                return 'unreachable'

            return Effect.from_(_op)

        result = await lookup('missing').and_then(second).fork(deps)
        assert isinstance(result, Err)
        assert started == []

    @pytest.mark.asyncio
    async def test_and_then_is_sequential(self, deps: Deps):
        """The second operation starts only after the first settles."""
        events: list[str] = []

        async def first(_deps: Deps) -> int:
            events.append('first:start')
            await asyncio.sleep(0.01)
            events.append('first:end')
            return 1

        async def second(_deps: Deps) -> int:
            events.append('second:start')
            return 2

        result = await Effect.from_(first).and_then(lambda _: Effect.from_(second)).fork(deps)
        assert result == Ok(2)
        assert events == ['first:start', 'first:end', 'second:start']

    @pytest.mark.asyncio
    async def test_zip_pairs_values(self, deps: Deps):
        deps.users['u-2'] = 'Grace'
        result = await lookup('u-1').zip(lookup('u-2')).fork(deps)
        assert result == Ok(('Ada', 'Grace'))

    @pytest.mark.asyncio
    async def test_zip_returns_first_err_by_position(self):
        result = await Effect.fail('left').zip(Effect.fail('right')).fork(None)
        assert result == Err('left')
        result = await Effect.succeed(1).zip(Effect.fail('right')).fork(None)
        assert result == Err('right')
