from typing import Callable

import pytest

from access_permissions.logging import ActivityLog, Logger
from providers import PendingTask, TaskOutputProvider


class MemorySink:
    def __init__(self):
        self.batches: list[list[ActivityLog]] = []

    def __call__(self, batch):
        self.batches.append(list(batch))

    @property
    def entries(self) -> list[ActivityLog]:
        return [entry for batch in self.batches for entry in batch]


class CountingTask(PendingTask):
    '''PendingTask that records how many times its action ran'''

    def __init__(self, name, value):
        self.calls = 0

        def action():
            self.calls += 1
            return value

        super().__init__(name, action)


@pytest.fixture
def memory_sink() -> MemorySink:
    return MemorySink()


@pytest.fixture
def logger(memory_sink: MemorySink) -> Logger:
    return Logger(batch_size=1, max_queue_size=64, sink=memory_sink)


@pytest.fixture
def pending() -> Callable[..., tuple[PendingTask, TaskOutputProvider]]:
    """Factory returning a (task, provider) pair whose output is `value` once executed."""

    def make(value, name: str = "upstream"):
        task = CountingTask(name, value)
        return task, TaskOutputProvider(task)

    return make
