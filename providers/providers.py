'''Deferred values that can be composed without being resolved'''
from abc import ABC, abstractmethod
from typing import Final, Generic

from providers.errors import MissingTaskOutput
from providers.tasks import PendingTask
from providers.typing import T, R, U, Combiner, Transformer, TaskDependencyResolveContext

__all__ = ('Provider', 'ValueProvider', 'TaskOutputProvider', 'MappedProvider', 'ZippedProvider', 'of')

class Provider(ABC, Generic[T]):
    '''Abstract base class for a value that may only be available later.

    `map` and `zip` never resolve their sources, they only record them. Resolution happens
    when `get()` is called and re-runs the recorded combinators every time, so combinators
    must be pure.
    '''
    __slots__ = ()

    @abstractmethod
    def get(self) -> T: ...

    @abstractmethod
    def visit_dependencies(self, context: TaskDependencyResolveContext) -> None: ...

    def map(self, transformer: Transformer[T, R]) -> 'Provider[R]':
        return MappedProvider(self, transformer)

    def zip(self, other: 'Provider[U]', combiner: Combiner[T, U, R]) -> 'Provider[R]':
        return ZippedProvider(self, other, combiner)

class ValueProvider(Provider[T]):
    '''Provider of a value that is known right now'''
    __slots__ = ('_value',)

    def __init__(self, value: T):
        self._value: Final[T] = value

    def get(self) -> T:
        return self._value

    def visit_dependencies(self, context: TaskDependencyResolveContext) -> None:
        return

    def __repr__(self) -> str:
        return f'ValueProvider({self._value!r})'

class TaskOutputProvider(Provider[T]):
    '''Provider of the output of a task that an external scheduler has yet to run'''
    __slots__ = ('_task',)

    def __init__(self, task: PendingTask[T]):
        self._task: Final[PendingTask[T]] = task

    @property
    def task(self) -> PendingTask[T]:
        return self._task

    def get(self) -> T:
        if not self._task.executed:
            raise MissingTaskOutput(task=self._task.name)
        return self._task.output

    def visit_dependencies(self, context: TaskDependencyResolveContext) -> None:
        if not self._task.executed:
            context.add(self._task)

    def __repr__(self) -> str:
        return f'TaskOutputProvider({self._task!r})'

class MappedProvider(Provider[R]):
    __slots__ = ('_source', '_transformer')

    def __init__(self, source: Provider[T], transformer: Transformer[T, R]):
        self._source: Final[Provider[T]] = source
        self._transformer: Final[Transformer[T, R]] = transformer

    def get(self) -> R:
        return self._transformer(self._source.get())

    def visit_dependencies(self, context: TaskDependencyResolveContext) -> None:
        self._source.visit_dependencies(context)

    def __repr__(self) -> str:
        return f'MappedProvider({self._source!r})'

class ZippedProvider(Provider[R]):
    __slots__ = ('_left', '_right', '_combiner')

    def __init__(self, left: Provider[T], right: Provider[U], combiner: Combiner[T, U, R]):
        self._left: Final[Provider[T]] = left
        self._right: Final[Provider[U]] = right
        self._combiner: Final[Combiner[T, U, R]] = combiner

    def get(self) -> R:
        return self._combiner(self._left.get(), self._right.get())

    def visit_dependencies(self, context: TaskDependencyResolveContext) -> None:
        self._left.visit_dependencies(context)
        self._right.visit_dependencies(context)

    def __repr__(self) -> str:
        return f'ZippedProvider({self._left!r}, {self._right!r})'

def of(value: T) -> ValueProvider[T]:
    return ValueProvider(value)
