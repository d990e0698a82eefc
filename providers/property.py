'''Mutable, typed holders of deferred values'''
from typing import Final, Optional, Union

from providers.errors import MissingValueError, PropertyFinalized
from providers.providers import Provider, ValueProvider
from providers.typing import T, TaskDependencyResolveContext

__all__ = ('Property',)

class Property(Provider[T]):
    '''Provider whose source can be replaced until its value is finalised.

    A property accepts either a plain value of its declared type or another provider. When
    `finalize_value_on_read()` is enabled, the first `get()` resolves the current source once,
    pins the result and rejects any later `set()`.
    '''
    __slots__ = ('_value_type', '_source', '_finalize_on_read', '_finalized')

    def __init__(self, value_type: type[T]):
        self._value_type: Final[type[T]] = value_type
        self._source: Optional[Provider[T]] = None
        self._finalize_on_read: bool = False
        self._finalized: bool = False

    @property
    def value_type(self) -> type[T]:
        return self._value_type

    @property
    def is_finalized(self) -> bool:
        return self._finalized

    @property
    def source(self) -> Optional[Provider[T]]:
        return self._source

    def set(self, value: Union[T, Provider[T], None]) -> None:
        if self._finalized:
            raise PropertyFinalized

        if value is None or isinstance(value, Provider):
            self._source = value
            return
        if not isinstance(value, self._value_type):
            raise TypeError(f'Cannot set the value of a property of type {self._value_type.__name__} using an instance of type {type(value).__name__}')
        self._source = ValueProvider(value)

    def value(self, value: Union[T, Provider[T], None]) -> 'Property[T]':
        self.set(value)
        return self

    def finalize_value_on_read(self) -> 'Property[T]':
        self._finalize_on_read = True
        return self

    def get(self) -> T:
        if self._source is None:
            raise MissingValueError

        resolved: T = self._source.get()
        if self._finalize_on_read and not self._finalized:
            self._source = ValueProvider(resolved)
            self._finalized = True
        return resolved

    def visit_dependencies(self, context: TaskDependencyResolveContext) -> None:
        if self._source is not None:
            self._source.visit_dependencies(context)

    def __repr__(self) -> str:
        return f'Property[{self._value_type.__name__}]({self._source!r})'
