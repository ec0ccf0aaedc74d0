from __future__ import annotations

import asyncio
import typing

from _infra import banner, run

from fnbox import future as F


def fluture_delay(seconds: float) -> F.Future[float, typing.Never]:
    def computation(reject, resolve):
        handle = asyncio.get_running_loop().call_later(seconds, resolve, seconds)
        return handle.cancel

    return F.future(computation)


async def fetch_page(url: str) -> dict:
    await asyncio.sleep(0.05)
    return {"url": url, "data": "<html>hello</html>"}


fetch = F.encase_p(fetch_page)
fetch_home = fetch("https://example.org/").pipe(F.map(lambda response: response["data"]))


async def main() -> None:
    banner("06_future: fork + cancel + encase_p")

    def on_failure(error: object) -> None:
        print(f"error: {error!r}")

    F.fork(on_failure, print, fluture_delay(0.1))
    await asyncio.sleep(0.15)

    unsubscribe = F.fork(on_failure, print, fluture_delay(1.5))
    # Returns cancel action
    unsubscribe()

    print(await F.promise(fetch_home))

    both = await F.promise(F.after(0.05, "left").pipe(F.both(F.after(0.01, "right"))))
    print(both)


if __name__ == "__main__":
    run(main)
