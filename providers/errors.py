from abc import ABC
from datetime import datetime
from typing import Optional

__all__ = ('ProviderException', 'MissingValueError', 'MissingTaskOutput', 'PropertyFinalized')

class ProviderException(ABC, Exception):
    '''Abstract base exception class for all failures raised while resolving deferred values'''
    description: str
    exception_iso_timestamp: str

    def __init__(self, description: Optional[str] = None):
        self.description = description or self.__class__.description
        self.exception_iso_timestamp = datetime.now().isoformat()
        super().__init__(self.description)

class MissingValueError(ProviderException):
    description: str = 'Cannot query the value of this property because it has no value available'

class MissingTaskOutput(ProviderException):
    description: str = "Cannot query the output of task '{task}' because it has not executed yet"

    def __init__(self, task: str, description: Optional[str] = None):
        super().__init__((description or MissingTaskOutput.description).format(task=task))
        self.task = task

class PropertyFinalized(ProviderException):
    description: str = 'The value for this property is final and cannot be changed any further'
