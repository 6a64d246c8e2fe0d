"""Tests for wren.navigation.sequence — ordered, short-circuiting callbacks."""

import anyio
import pytest

from wren.navigation.sequence import SequenceResult, sequence


def _recorder(log: list[str], name: str, result: object = None):
    def callback():
        log.append(name)
        return result

    return callback


@pytest.mark.anyio
async def test_all_succeed() -> None:
    log: list[str] = []
    result = await sequence([_recorder(log, "a"), _recorder(log, "b", True)])
    assert result == SequenceResult(count=2, success=True)
    assert log == ["a", "b"]


@pytest.mark.anyio
async def test_false_stops_the_run() -> None:
    log: list[str] = []
    result = await sequence([
        _recorder(log, "a"),
        _recorder(log, "b", False),
        _recorder(log, "c"),
    ])
    assert log == ["a", "b"]
    assert result.count == 2
    assert result.success is False


@pytest.mark.anyio
async def test_only_exact_false_stops() -> None:
    log: list[str] = []
    result = await sequence([_recorder(log, "a", 0), _recorder(log, "b", ""), _recorder(log, "c")])
    assert result == SequenceResult(count=3, success=True)


@pytest.mark.anyio
async def test_empty() -> None:
    assert await sequence([]) == SequenceResult(count=0, success=True)


@pytest.mark.anyio
async def test_async_callbacks_run_one_at_a_time() -> None:
    log: list[str] = []

    async def slow() -> None:
        log.append("slow:start")
        await anyio.sleep(0.01)
        log.append("slow:end")

    async def fast() -> bool:
        log.append("fast")
        return True

    result = await sequence([slow, fast])
    assert log == ["slow:start", "slow:end", "fast"]
    assert result.success is True


@pytest.mark.anyio
async def test_async_false_stops() -> None:
    async def deny() -> bool:
        return False

    log: list[str] = []
    result = await sequence([deny, _recorder(log, "never")])
    assert result == SequenceResult(count=1, success=False)
    assert log == []


@pytest.mark.anyio
async def test_exception_propagates() -> None:
    def boom() -> None:
        raise RuntimeError("boom")

    with pytest.raises(RuntimeError, match="boom"):
        await sequence([boom])
