'''Activity logging for permission decoding and resolution'''
import sys
from collections import deque
from datetime import datetime
from enum import Enum, IntFlag
from pathlib import Path
from typing import Annotated, BinaryIO, Callable, Final, Optional, Sequence, Union

import orjson
from pydantic import BaseModel, Field

__all__ = ('Severity', 'LogType', 'LogAuthor', 'ActivityLog', 'LogSink', 'StreamSink', 'Logger')

class Severity(IntFlag):
    INFO                    = 1
    TRACE                   = 2
    ERROR                   = 3
    NON_CRITICAL_FAILURE    = 4
    CRITICAL_FAILURE        = 5

class LogType(Enum):
    ENCODING            = 'encoding'
    RESOLUTION          = 'resolution'
    CONFIGURATION       = 'configuration'
    INTERNAL            = 'internal'
    UNKNOWN             = 'unknown'

class LogAuthor(Enum):
    CODEC               = 'codec'
    PERMISSION_TRIAD    = 'permission_triad'
    FILE_PERMISSIONS    = 'file_permissions'
    BOOTUP_HANDLER      = 'bootup_handler'
    CLI                 = 'cli'
    EXCEPTION_FALLBACK  = 'exception_fallback'


class ActivityLog(BaseModel):
    occurance_time: Annotated[datetime, Field(frozen=True, default_factory=datetime.now)]
    severity: Annotated[int, Field(le=5, ge=1, default=1)]
    logged_by: Annotated[LogAuthor, Field(default=LogAuthor.CODEC)]
    log_category: Annotated[LogType, Field(default=LogType.UNKNOWN)]
    log_details: Annotated[Optional[str], Field(max_length=512, default=None)]

LogSink = Callable[[Sequence[ActivityLog]], None]

class StreamSink:
    '''Writes each log entry as one JSON line, either to a binary stream or appended to a file'''
    __slots__ = ('_target',)

    def __init__(self, target: Union[Path, BinaryIO, None] = None):
        self._target: Final[Union[Path, BinaryIO]] = target if target is not None else sys.stderr.buffer

    def __call__(self, batch: Sequence[ActivityLog]) -> None:
        payload: bytes = b''.join(orjson.dumps(log_entry.model_dump(mode='json')) + b'\n' for log_entry in batch)
        if isinstance(self._target, Path):
            self._target.parent.mkdir(parents=True, exist_ok=True)
            with self._target.open('ab') as log_file:
                log_file.write(payload)
            return

        self._target.write(payload)
        self._target.flush()

class Logger:
    '''Bounded queue of activity logs, flushed to a sink in batches.

    Entries below `min_severity` are ignored, and entries arriving while the queue is full are
    dropped rather than blocking the caller.
    '''
    __slots__ = ('_log_queue', '_sink', '_batch_size', '_max_queue_size', '_min_severity', '_dropped')

    def __init__(self,
                 batch_size: int,
                 max_queue_size: int,
                 min_severity: Severity = Severity.INFO,
                 sink: Optional[LogSink] = None):
        self._batch_size: int = batch_size
        self._max_queue_size: int = max_queue_size
        self._min_severity: Severity = min_severity
        self._sink: Final[LogSink] = sink or StreamSink()
        self._log_queue: Final[deque[ActivityLog]] = deque()
        self._dropped: int = 0

        # Route through setters for validation
        self.batch_size = batch_size
        self.max_queue_size = max_queue_size

    @property
    def batch_size(self) -> int:
        return self._batch_size
    @batch_size.setter
    def batch_size(self, value: int) -> None:
        if not isinstance(value, int) or (value <= 0):
            raise ValueError("Batch size must be a positive integer")
        self._batch_size = value

    @property
    def max_queue_size(self) -> int:
        return self._max_queue_size
    @max_queue_size.setter
    def max_queue_size(self, value: int) -> None:
        if not isinstance(value, int) or (value <= 0):
            raise ValueError("Log queue size must be a positive integer")
        self._max_queue_size = value

    @property
    def min_severity(self) -> Severity:
        return self._min_severity
    @min_severity.setter
    def min_severity(self, value: Severity) -> None:
        self._min_severity = Severity(value)

    @property
    def dropped(self) -> int:
        return self._dropped

    @property
    def pending(self) -> int:
        return len(self._log_queue)

    def enqueue_log(self, log: ActivityLog) -> None:
        if log.severity < self._min_severity:
            return
        if len(self._log_queue) >= self._max_queue_size:
            self._dropped += 1
            return

        self._log_queue.append(log)
        if len(self._log_queue) >= self._batch_size:
            self.flush()

    def log(self, severity: Severity, logged_by: LogAuthor, log_category: LogType, log_details: Optional[str] = None) -> None:
        if log_details is not None:
            log_details = log_details[:512]
        self.enqueue_log(ActivityLog(severity=severity, logged_by=logged_by, log_category=log_category, log_details=log_details))

    def flush(self) -> None:
        while self._log_queue:
            batch: list[ActivityLog] = [self._log_queue.popleft() for _ in range(min(self._batch_size, len(self._log_queue)))]
            self._sink(batch)

    def close(self) -> None:
        self.flush()
