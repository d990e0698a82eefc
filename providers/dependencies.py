'''Inspection of the upstream work a provider depends on'''
from typing import Any

from providers.providers import Provider

__all__ = ('TaskDependencyDetector', 'has_task_dependency')

class TaskDependencyDetector:
    '''Resolve context that only records whether any dependency was reported.

    A single detector may be reused across several providers, the state is reset on every query.
    '''
    __slots__ = ('_empty',)

    def __init__(self) -> None:
        self._empty: bool = True

    def has_task_dependency(self, provider: Provider[Any]) -> bool:
        self._empty = True
        provider.visit_dependencies(self)
        return not self._empty

    def add(self, dependency: Any) -> None:
        self._empty = False

    def visit_failure(self, failure: BaseException) -> None:
        # Failures while visiting are surfaced on resolution instead
        return

def has_task_dependency(provider: Provider[Any]) -> bool:
    return TaskDependencyDetector().has_task_dependency(provider)
