'''Typing support for provider combinators'''
from typing import Any, Protocol, TypeVar

__all__ = ('T', 'R', 'U', 'Transformer', 'Combiner', 'TaskDependencyResolveContext')

T = TypeVar('T')
R = TypeVar('R')
U = TypeVar('U')

T_contra = TypeVar('T_contra', contravariant=True)
U_contra = TypeVar('U_contra', contravariant=True)
R_co = TypeVar('R_co', covariant=True)

class Transformer(Protocol[T_contra, R_co]):
    def __call__(self, value: T_contra, /) -> R_co: ...

class Combiner(Protocol[T_contra, U_contra, R_co]):
    def __call__(self, left: T_contra, right: U_contra, /) -> R_co: ...

class TaskDependencyResolveContext(Protocol):
    def add(self, dependency: Any) -> None: ...

    def visit_failure(self, failure: BaseException) -> None: ...
