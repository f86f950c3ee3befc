"""
Async / Await

asyncio runs coroutines on one thread; ``await`` hands control back to the
event loop until the awaited thing is ready. Blocking functions are pushed
to a worker thread with asyncio.to_thread so the loop stays responsive.

    create_task          schedule a coroutine to run concurrently
    asyncio.sleep        non-blocking delay
    gather               wait for all (when-all)
    wait(FIRST_COMPLETED) continue when any one finishes (when-any)
    Task.done()          has the task finished?
    Task.result()        value of a finished task
"""

import asyncio

from primer.core.constants import DemoCategory
from primer.demos import pacing
from primer.demos.registry import register_demo


def print_data(name: str, delay_ms: int) -> None:
    """Blocking work: print, sleep, print."""
    print(f"{name} started")
    pacing.sleep(delay_ms / 1000)
    print(f"{name} completed")


def calculate_sum(n: int) -> int:
    total = 0
    for i in range(1, n + 1):
        total += i
    return total


async def countdown(name: str, count: int) -> str:
    """Native coroutine: yields to the loop on every step."""
    for remaining in range(count, 0, -1):
        print(f"{name}: {remaining}")
        await pacing.async_sleep(0.1)
    return f"{name} done"


async def announce() -> None:
    print("Manual task started")


async def main() -> None:
    print("Main coroutine started")

    t1 = asyncio.create_task(asyncio.to_thread(print_data, "Task1", 1000))
    await pacing.async_sleep(0.5)
    print("After asyncio.sleep(0.5)")
    await t1

    result = await asyncio.to_thread(calculate_sum, 10)
    print(f"Sum result from worker thread: {result}")

    await asyncio.gather(
        asyncio.to_thread(print_data, "A", 600),
        asyncio.to_thread(print_data, "B", 400),
    )
    print("Both tasks A and B completed")

    task_c = asyncio.create_task(asyncio.to_thread(print_data, "C", 1000))
    task_d = asyncio.create_task(asyncio.to_thread(print_data, "D", 300))
    done, pending = await asyncio.wait({task_c, task_d}, return_when=asyncio.FIRST_COMPLETED)
    print("One of the tasks (C or D) completed")
    # Threads cannot be cancelled, so let the slower one finish before moving on
    await asyncio.gather(*pending)

    t3 = asyncio.create_task(asyncio.to_thread(calculate_sum, 5))
    print(f"done(): {t3.done()}")
    await t3
    print(f"done() after await: {t3.done()}")
    print(f"Result of t3: {t3.result()}")

    results = await asyncio.gather(countdown("X", 2), countdown("Y", 2))
    print(f"Countdowns: {results}")

    # A coroutine object does nothing until it is awaited or wrapped in a task
    pending_coroutine = announce()
    t4 = asyncio.create_task(pending_coroutine)
    await t4

    print("Main coroutine completed")


@register_demo("async_await", "Async / Await", DemoCategory.CONCURRENCY)
def run() -> None:
    """Coroutines, tasks, gather and wait with asyncio."""
    asyncio.run(main())
