"""
Threads

threading.Thread runs a callable on its own OS thread. Python threads cannot
be interrupted from outside; a worker that should stop early waits on a
threading.Event instead of sleeping, and the controller sets the event.
Daemon threads do not keep the interpreter alive at exit.
"""

import threading

from primer.core.constants import DemoCategory
from primer.demos import pacing
from primer.demos.registry import register_demo


def thread_state(thread: threading.Thread) -> str:
    if thread.ident is None:
        return "Unstarted"
    if thread.is_alive():
        return "Running"
    return "Stopped"


def print_numbers(stop: threading.Event) -> None:
    name = threading.current_thread().name
    print(f"[{name}] Started.")
    for i in range(1, 6):
        print(f"[{name}] -> {i}")
        if pacing.wait(stop, 0.5):
            print(f"[{name}] was interrupted while sleeping.")
            return


@register_demo("threads", "Threads", DemoCategory.CONCURRENCY)
def run() -> None:
    """Starting, naming, interrupting and joining threads."""
    stop = threading.Event()

    thread1 = threading.Thread(target=print_numbers, args=(stop,), name="WorkerThread-1")

    def count_up() -> None:
        name = threading.current_thread().name
        print(f"[{name}] Started.")
        for i in range(5):
            print(f"[{name}] -> {i}")
            pacing.sleep(0.3)

    thread2 = threading.Thread(target=count_up, name="LambdaThread", daemon=True)

    print(f"Thread1 state before start: {thread_state(thread1)}")
    print(f"Thread2 state before start: {thread_state(thread2)}")

    thread1.start()
    thread2.start()

    print(f"Thread1 ident: {thread1.ident}")
    print(f"Thread2 daemon: {thread2.daemon}")

    pacing.sleep(1.0)

    if thread1.is_alive():
        print("\nInterrupting thread1...")
        stop.set()

    thread1.join()
    thread2.join()

    print(f"\nThread1 final state: {thread_state(thread1)}")
    print(f"Thread2 final state: {thread_state(thread2)}")

    print("Main thread finished.")
