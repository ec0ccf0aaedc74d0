from __future__ import annotations

import asyncio

from _infra import banner, run

from fnbox import Resolver, Task, ops as R, task, trace, wait_all

response_one = {"data": {"foo": {"zip": True, "pop": False, "bang": True}}}
response_two = {"data": {"bar": {"wiz": True, "pow": True, "zop": True}}}
response_three = {"data": {"baz": {"beep": False, "boop": False, "fizz": True}}}


def request(seconds: float, data: dict) -> Task[dict, str]:
    def computation(resolver: Resolver[dict, str]) -> None:
        handle = asyncio.get_running_loop().call_later(seconds, resolver.resolve, data)
        resolver.cleanup(handle.cancel)

    return task(computation)


def request_fail(seconds: float) -> Task[dict, float]:
    def computation(resolver: Resolver[dict, float]) -> None:
        handle = asyncio.get_running_loop().call_later(seconds, resolver.reject, seconds)
        resolver.cleanup(handle.cancel)

    return task(computation)


# Pure: nothing runs until fetch_all.run()
request_a = request(0.1, response_one).map(R.prop("data")).or_else(lambda _: Task.of({"foo": {}}))
request_b = request(0.5, response_two).map(R.prop("data")).or_else(lambda _: Task.of({"bar": {}}))
request_c = request_fail(0.2).map(R.prop("data")).or_else(lambda _: Task.of({"baz": {}}))

fetch_all = wait_all([request_a, request_b, request_c]).map(trace).map(R.merge_all).map(trace)


async def main() -> None:
    banner("05_task_fetch_all: task + or_else + wait_all")

    merged = await fetch_all.run().promise()
    print(merged)

    banner("05_task_fetch_all: race + listen + cancel")
    execution = request(0.1, {"winner": "fast"}).or_(request(2.0, {"winner": "slow"})).run()
    execution.listen(
        on_cancelled=lambda: print("task was cancelled"),
        on_rejected=lambda reason: print(f"task was rejected because {reason}"),
        on_resolved=print,
    )
    await execution.result()

    slow = request(5.0, {}).run()
    slow.listen(on_cancelled=lambda: print("task was cancelled"))
    slow.cancel()
    await asyncio.sleep(0)


if __name__ == "__main__":
    run(main)
