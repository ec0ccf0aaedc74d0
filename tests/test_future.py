import asyncio

import pytest

from fnbox import TaskRejectedError
from fnbox import future as F
from fnbox import ops as R


def run(main):
    return asyncio.run(main())


def test_fork_reports_resolution():
    events = []

    def computation(reject, resolve):
        handle = asyncio.get_running_loop().call_later(0.01, resolve, "done")
        return handle.cancel

    async def main():
        F.fork(events.append, events.append, F.future(computation))
        await asyncio.sleep(0.05)

    run(main)
    assert events == ["done"]


def test_fork_returns_cancel_that_reaches_the_computation():
    events = []

    def computation(reject, resolve):
        handle = asyncio.get_running_loop().call_later(5, resolve, "late")

        def cancel():
            handle.cancel()
            events.append("cancelled")

        return cancel

    async def main():
        cancel = F.fork(events.append)(events.append)(F.future(computation))
        await asyncio.sleep(0)
        cancel()
        await asyncio.sleep(0.01)

    run(main)
    assert events == ["cancelled"]


def test_pipe_operators():
    async def main():
        return (
            await F.promise(F.resolve(2).pipe(F.map(R.inc), F.chain(lambda x: F.resolve(x * 10)))),
            await F.promise(F.reject("e").pipe(F.map_rej(str.upper), F.chain_rej(F.resolve))),
            await F.promise(F.reject("e").pipe(F.alt(F.resolve("fallback")))),
            await F.promise(F.reject("e").pipe(F.coalesce(len, R.identity))),
            await F.promise(F.resolve(1).pipe(F.bimap(str.upper, R.inc))),
        )

    assert run(main) == (30, "E", "fallback", 1, 2)


def test_both_and_race():
    async def main():
        pair = await F.promise(F.after(0.02, "a").pipe(F.both(F.after(0.01, "b"))))
        winner = await F.promise(F.after(0.05, "slow").pipe(F.race(F.after(0.01, "fast"))))
        return pair, winner

    assert run(main) == (("a", "b"), "fast")


def test_reject_after_and_promise_errors():
    async def main():
        with pytest.raises(TaskRejectedError) as info:
            await F.promise(F.reject_after(0.01, "too slow"))
        return info.value.reason

    assert run(main) == "too slow"


def parse(text):
    return int(text)


def test_encase_variants():
    async def fetch(url):
        await asyncio.sleep(0)
        return {"data": f"<html>{url}</html>"}

    async def main():
        parsed = await F.promise(F.encase(parse)("42"))
        with pytest.raises(ValueError):
            await F.promise(F.encase(parse)("x"))
        page = await F.promise(F.encase_p(fetch)("home").pipe(F.map(R.prop("data"))))
        attempted = await F.promise(F.attempt_p(lambda: fetch("about")))
        return parsed, page, attempted

    assert run(main) == (42, "<html>home</html>", {"data": "<html>about</html>"})


def test_parallel_is_curried():
    async def main():
        return await F.promise(F.parallel(2)([F.after(0.01, 1), F.resolve(2), F.after(0.02, 3)]))

    assert run(main) == [1, 2, 3]
