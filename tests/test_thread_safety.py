"""Thread and task isolation of begin/end pairing.

The context-bound tag stack is documented as isolated per thread and per
asyncio task. These tests open elements concurrently and verify that no
worker ever sees another worker's open elements.
"""

import asyncio
import threading
from concurrent.futures import ThreadPoolExecutor

from etiqueta import Div, Section, get_tag_stack


def _render_nested(depth: int, barrier: threading.Barrier | None = None) -> str:
    html = ""
    for _ in range(depth):
        html += Div.tag().begin()
    if barrier is not None:
        barrier.wait()
    html += "x"
    for _ in range(depth):
        html += Div.end()
    return html


def _expected(depth: int) -> str:
    return "<div>\n" * depth + "x" + "\n</div>" * depth


class TestThreadIsolation:
    def test_concurrent_threads_have_own_stacks(self) -> None:
        workers = 8
        barrier = threading.Barrier(workers)
        with ThreadPoolExecutor(max_workers=workers) as pool:
            futures = [pool.submit(_render_nested, i + 1, barrier) for i in range(workers)]
            results = [f.result(timeout=10) for f in futures]

        assert results == [_expected(i + 1) for i in range(workers)]

    def test_thread_entries_do_not_leak_to_caller(self) -> None:
        Section.tag().begin()

        def open_and_leave_open() -> None:
            Div.tag().begin()
            Div.tag().begin()

        thread = threading.Thread(target=open_and_leave_open)
        thread.start()
        thread.join()

        assert get_tag_stack().open_types == (Section,)
        assert Section.end() == "\n</section>"


class TestTaskIsolation:
    def test_interleaved_tasks(self) -> None:
        async def worker(depth: int) -> str:
            html = ""
            for _ in range(depth):
                html += Div.tag().begin()
                await asyncio.sleep(0)
            html += "x"
            for _ in range(depth):
                await asyncio.sleep(0)
                html += Div.end()
            return html

        async def main() -> list[str]:
            return await asyncio.gather(*(worker(d) for d in range(1, 6)))

        assert asyncio.run(main()) == [_expected(d) for d in range(1, 6)]
        assert len(get_tag_stack()) == 0
