'''Deferred values, tasks and dependency inspection'''
from providers.dependencies import TaskDependencyDetector, has_task_dependency
from providers.errors import MissingTaskOutput, MissingValueError, PropertyFinalized, ProviderException
from providers.property import Property
from providers.providers import MappedProvider, Provider, TaskOutputProvider, ValueProvider, ZippedProvider, of
from providers.tasks import PendingTask

__all__ = ('Provider', 'ValueProvider', 'TaskOutputProvider', 'MappedProvider', 'ZippedProvider', 'Property',
           'PendingTask', 'TaskDependencyDetector', 'has_task_dependency', 'of',
           'ProviderException', 'MissingValueError', 'MissingTaskOutput', 'PropertyFinalized')
