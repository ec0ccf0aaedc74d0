import asyncio

import pytest
from kungfu import Error, LazyCoroResult, Ok

from fnbox import Resolver, Task, TaskCancelledError, TaskRejectedError, delay, from_promised, parallel, task, wait_all, wait_any
from fnbox import ops as R

response_one = {"data": {"foo": {"zip": True, "pop": False, "bang": True}}}
response_two = {"data": {"bar": {"wiz": True, "pow": True, "zop": True}}}
response_three = {"data": {"baz": {"beep": False, "boop": False, "fizz": True}}}


def request(seconds, data):
    def computation(resolver):
        handle = asyncio.get_running_loop().call_later(seconds, resolver.resolve, data)
        resolver.cleanup(handle.cancel)

    return task(computation)


def request_fail(seconds):
    def computation(resolver):
        handle = asyncio.get_running_loop().call_later(seconds, resolver.reject, seconds)
        resolver.cleanup(handle.cancel)

    return task(computation)


def tracked(events, name, seconds=5.0):
    """Slow task that records cancellation and cleanup."""

    def computation(resolver: Resolver):
        handle = asyncio.get_running_loop().call_later(seconds, resolver.resolve, name)
        resolver.cleanup(handle.cancel)
        resolver.cleanup(lambda: events.append(f"{name}:cleanup"))
        resolver.on_cancelled(lambda: events.append(f"{name}:cancelled"))

    return task(computation)


def run(main):
    return asyncio.run(main())


def test_task_is_lazy():
    calls = []
    mapped = task(lambda resolver: (calls.append("run"), resolver.resolve(1))).map(R.inc)

    assert calls == []

    async def main():
        return await mapped.run().promise()

    assert run(main) == 2
    assert calls == ["run"]


def test_await_task_returns_result():
    async def main():
        return await Task.of(1).map(R.inc), await Task.rejected("no").map(R.inc)

    resolved, rejected = run(main)
    match resolved:
        case Ok(value):
            assert value == 2
        case _:
            pytest.fail("expected Ok")
    match rejected:
        case Error(reason):
            assert reason == "no"
        case _:
            pytest.fail("expected Error")


def test_only_first_settlement_counts():
    def computation(resolver):
        resolver.resolve(1)
        resolver.reject("late")
        resolver.resolve(2)

    async def main():
        return await task(computation).run().promise()

    assert run(main) == 1


def test_chain_or_else_fold_swap():
    async def main():
        chained = await Task.of(2).chain(lambda x: Task.of(x * 10)).run().promise()
        recovered = await Task.rejected("boom").or_else(lambda reason: Task.of(f"saved {reason}")).run().promise()
        folded = await Task.rejected("boom").fold(len, R.identity).run().promise()
        swapped = await Task.rejected("boom").swap().run().promise()
        mapped = await Task.rejected("boom").map_rejected(str.upper).swap().run().promise()
        bimapped = await Task.of(1).bimap(str.upper, R.inc).run().promise()
        return chained, recovered, folded, swapped, mapped, bimapped

    assert run(main) == (20, "saved boom", 4, "boom", "BOOM", 2)


def test_chain_short_circuits_on_rejection():
    calls = []

    async def main():
        return await Task.rejected("no").chain(lambda x: Task.of(calls.append(x))).run().result()

    match run(main):
        case Error(reason):
            assert reason == "no"
        case _:
            pytest.fail("expected Error")
    assert calls == []


def test_monad_laws():
    f = lambda x: Task.of(x + 1)
    g = lambda x: Task.of(x * 2)

    async def value(t):
        return await t.run().promise()

    async def main():
        return (
            await value(Task.of(3).chain(f)) == await value(f(3)),
            await value(Task.of(3).chain(Task.of)) == 3,
            await value(Task.of(3).chain(f).chain(g)) == await value(Task.of(3).chain(lambda x: f(x).chain(g))),
        )

    assert run(main) == (True, True, True)


def test_fetch_all_merges_responses_with_defaults():
    request_a = request(0.03, response_one).map(R.prop("data")).or_else(lambda _: Task.of({"foo": {}}))
    request_b = request(0.01, response_two).map(R.prop("data")).or_else(lambda _: Task.of({"bar": {}}))
    request_c = request_fail(0.02).map(R.prop("data")).or_else(lambda _: Task.of({"baz": {}}))
    fetch_all = wait_all([request_a, request_b, request_c]).map(R.merge_all)

    async def main():
        return await fetch_all.run().promise()

    assert run(main) == {
        "foo": {"zip": True, "pop": False, "bang": True},
        "bar": {"wiz": True, "pow": True, "zop": True},
        "baz": {},
    }


def test_wait_all_keeps_input_order():
    async def main():
        return await wait_all([delay(0.03, "a"), delay(0.01, "b"), Task.of("c")]).run().promise()

    assert run(main) == ["a", "b", "c"]


def test_wait_all_first_rejection_cancels_the_rest():
    events = []

    async def main():
        return await wait_all([tracked(events, "slow"), request_fail(0.01)]).run().result()

    match run(main):
        case Error(reason):
            assert reason == 0.01
        case _:
            pytest.fail("expected Error")
    assert events == ["slow:cancelled", "slow:cleanup"]


def test_race_cancels_the_loser():
    events = []

    async def main():
        return await request(0.01, "fast").or_(tracked(events, "slow")).run().promise()

    assert run(main) == "fast"
    assert events == ["slow:cancelled", "slow:cleanup"]


def test_wait_any_and_both():
    async def main():
        first = await wait_any([delay(0.05, "a"), delay(0.01, "b")]).run().promise()
        pair = await delay(0.02, "left").and_(delay(0.01, "right")).run().promise()
        return first, pair

    assert run(main) == ("b", ("left", "right"))


def test_empty_collections_are_rejected():
    with pytest.raises(ValueError):
        wait_all([])
    with pytest.raises(ValueError):
        wait_any([])
    with pytest.raises(ValueError):
        parallel(0, [Task.of(1)])


def test_parallel_limits_concurrency():
    async def main():
        running = 0
        peak = 0

        async def job(n):
            nonlocal running, peak
            running += 1
            peak = max(peak, running)
            await asyncio.sleep(0.01)
            running -= 1
            return n

        tasks = [Task.from_coroutine_fn(lambda n=n: job(n)) for n in range(5)]
        values = await parallel(2, tasks).run().promise()
        return values, peak

    assert run(main) == ([0, 1, 2, 3, 4], 2)


def test_cancel_runs_cleanup_and_cancel_listeners_only():
    events = []

    async def main():
        execution = tracked(events, "job").run()
        execution.listen(
            on_resolved=lambda value: events.append("resolved"),
            on_cancelled=lambda: events.append("listener:cancelled"),
        )
        await asyncio.sleep(0)
        execution.cancel()
        with pytest.raises(TaskCancelledError):
            await execution.promise()
        await asyncio.sleep(0)
        return execution.cancelled

    assert run(main) is True
    assert events[:2] == ["job:cancelled", "job:cleanup"]
    assert "listener:cancelled" in events
    assert "resolved" not in events


def test_listen_reports_outcomes_and_can_unsubscribe():
    events = []

    async def main():
        resolved = Task.of(1).run()
        resolved.listen(on_resolved=lambda value: events.append(("resolved", value)))
        rejected = Task.rejected("why").run()
        rejected.listen(on_rejected=lambda reason: events.append(("rejected", reason)))
        silent = Task.of(2).run()
        unsubscribe = silent.listen(on_resolved=lambda value: events.append(("silent", value)))
        unsubscribe()
        await asyncio.gather(resolved.result(), rejected.result(), silent.result())
        await asyncio.sleep(0)

    run(main)
    assert ("resolved", 1) in events
    assert ("rejected", "why") in events
    assert all(name != "silent" for name, _ in events)


def test_promise_raises_rejection_reasons():
    async def main():
        with pytest.raises(TaskRejectedError) as info:
            await Task.rejected({"message": "something went wrong"}).run().promise()
        assert info.value.reason == {"message": "something went wrong"}

        with pytest.raises(KeyError):
            await Task.rejected(KeyError("missing")).run().promise()

    run(main)


def test_from_promised_turns_exceptions_into_rejections():
    async def fetch(url):
        if url.startswith("bad"):
            raise ConnectionError(url)
        return {"data": url}

    get = from_promised(fetch)

    async def main():
        ok = await get("good").map(R.prop("data")).run().promise()
        failed = await get("bad").run().result()
        return ok, failed

    ok, failed = run(main)
    assert ok == "good"
    match failed:
        case Error(ConnectionError() as exc):
            assert str(exc) == "bad"
        case _:
            pytest.fail("expected Error(ConnectionError)")


def test_execution_future_observes_the_same_run():
    calls = []

    def computation(resolver):
        calls.append("run")
        resolver.resolve("once")

    async def main():
        execution = task(computation).run()
        observed = await execution.future().map(str.upper).run().promise()
        return observed, await execution.promise()

    assert run(main) == ("ONCE", "once")
    assert calls == ["run"]


def test_lazy_coro_result_round_trip():
    async def main():
        lazy = Task.of(1).map(R.inc).to_lazy_coro_result()
        async def five():
            return Ok(5)

        back = Task.from_lazy_coro_result(LazyCoroResult(five))
        return await lazy, await back.run().promise()

    result, value = run(main)
    match result:
        case Ok(inner):
            assert inner == 2
        case _:
            pytest.fail("expected Ok")
    assert value == 5


def test_run_requires_an_event_loop():
    with pytest.raises(RuntimeError):
        Task.of(1).run()


def test_failing_cleanup_keeps_outcome_and_runs_the_rest(caplog):
    events = []

    def failing():
        raise RuntimeError("cleanup failed")

    def computation(resolver):
        resolver.cleanup(failing)
        resolver.cleanup(lambda: events.append("second"))
        resolver.resolve(1)

    async def main():
        return await task(computation).run().result()

    match run(main):
        case Ok(value):
            assert value == 1
        case _:
            pytest.fail("expected Ok")
    assert events == ["second"]
    assert "cleanup failed" in caplog.text


def test_failing_cancel_handler_does_not_skip_the_rest():
    events = []

    def failing():
        raise RuntimeError("handler failed")

    def computation(resolver):
        handle = asyncio.get_running_loop().call_later(5, resolver.resolve, 1)
        resolver.cleanup(handle.cancel)
        resolver.cleanup(lambda: events.append("cleanup"))
        resolver.on_cancelled(failing)
        resolver.on_cancelled(lambda: events.append("cancelled"))

    async def main():
        execution = task(computation).run()
        await asyncio.sleep(0)
        execution.cancel()
        with pytest.raises(TaskCancelledError):
            await execution.promise()

    run(main)
    assert events == ["cancelled", "cleanup"]


def test_and_rejects_when_either_side_rejects():
    async def main():
        return await Task.of(1).and_(Task.rejected("no")).run().result()

    match run(main):
        case Error(reason):
            assert reason == "no"
        case _:
            pytest.fail("expected Error")
