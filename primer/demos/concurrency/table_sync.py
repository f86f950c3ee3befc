"""Two threads sharing one object; a lock keeps each table's lines together."""

import threading

from primer.core.constants import DemoCategory
from primer.demos import pacing
from primer.demos.registry import register_demo


class TableSync:
    def __init__(self):
        self._lock = threading.Lock()

    def print_table(self, n: int) -> None:
        with self._lock:
            for i in range(1, 6):
                print(f"{n} x {i} = {n * i}")
                pacing.sleep(0.4)


@register_demo("table_sync", "Synchronized Tables", DemoCategory.CONCURRENCY)
def run() -> None:
    """threading.Lock around a multiplication table."""
    print("Main thread started")

    table = TableSync()

    t1 = threading.Thread(target=table.print_table, args=(5,))
    t2 = threading.Thread(target=table.print_table, args=(100,))

    t1.start()
    t2.start()

    t1.join()
    t2.join()

    print("Main thread finished")
