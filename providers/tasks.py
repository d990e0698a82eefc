'''Units of upstream work that deferred values can depend on'''
from typing import Callable, Final, Generic, Optional

from providers.typing import T

__all__ = ('PendingTask',)

class PendingTask(Generic[T]):
    '''A piece of work owned by an external scheduler.

    The action runs at most once, when the scheduler calls `execute()`. Until then,
    anything that depends on the task's output is considered to depend on unexecuted work.
    '''
    __slots__ = ('name', '_action', '_executed', '_output')

    def __init__(self, name: str, action: Callable[[], T]):
        self.name: Final[str] = name
        self._action: Final[Callable[[], T]] = action
        self._executed: bool = False
        self._output: Optional[T] = None

    @property
    def executed(self) -> bool:
        return self._executed

    @property
    def output(self) -> Optional[T]:
        return self._output

    def execute(self) -> T:
        if not self._executed:
            self._output = self._action()
            self._executed = True
        return self._output

    def __repr__(self) -> str:
        return f'<PendingTask {self.name!r} executed={self._executed}>'
