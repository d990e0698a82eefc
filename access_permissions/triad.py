'''Read/write/execute permission triad of a single user class'''
import operator
from typing import Final, Optional, Union

from access_permissions import codec
from access_permissions.errors import InvalidEncodingError
from access_permissions.logging import LogAuthor, Logger, LogType, Severity

from models.constants import ENCODING_CONSTANTS
from models.flags import UnixPermissionFlags
from models.typing import ClassIndex, UnixEncoding, UnixNumeric

from providers import Property, PropertyFinalized, Provider, ValueProvider, has_task_dependency

__all__ = ('FileAccessPermission',)

FlagSource = Union[bool, Provider[bool]]

def _read_weight(read: bool) -> int:
    return UnixPermissionFlags.READ.value if read else 0

def _write_weight(write: bool) -> int:
    return UnixPermissionFlags.WRITE.value if write else 0

def _execute_weight(execute: bool) -> int:
    return UnixPermissionFlags.EXECUTE.value if execute else 0

def _read_symbol(read: bool) -> str:
    return ENCODING_CONSTANTS.symbols.read if read else ENCODING_CONSTANTS.symbols.unset

def _write_symbol(write: bool) -> str:
    return ENCODING_CONSTANTS.symbols.write if write else ENCODING_CONSTANTS.symbols.unset

def _execute_symbol(execute: bool) -> str:
    return ENCODING_CONSTANTS.symbols.execute if execute else ENCODING_CONSTANTS.symbols.unset

class FileAccessPermission:
    '''Permission flags of one user class (owner, group or other).

    Every flag is a `Property[bool]` that may hold a plain value or a provider depending on a
    pending task. Flags are pinned the first time they are read, until then they can be replaced
    freely (for instance through `unix()`).
    '''
    __slots__ = ('_read', '_write', '_execute', '_logger')

    def __init__(self, unix_numeric: UnixNumeric = 0, logger: Optional[Logger] = None):
        if isinstance(unix_numeric, bool) or not isinstance(unix_numeric, int) or not (0 <= unix_numeric <= ENCODING_CONSTANTS.max_numeric):
            raise InvalidEncodingError(raw=unix_numeric,
                                       description=f'Numeric permission must be an integer between 0 and {ENCODING_CONSTANTS.max_numeric}, got ({unix_numeric!r})')

        self._logger: Final[Optional[Logger]] = logger
        self._read: Final[Property[bool]] = Property(bool).value(codec.is_read(unix_numeric)).finalize_value_on_read()
        self._write: Final[Property[bool]] = Property(bool).value(codec.is_write(unix_numeric)).finalize_value_on_read()
        self._execute: Final[Property[bool]] = Property(bool).value(codec.is_execute(unix_numeric)).finalize_value_on_read()

    @classmethod
    def from_flags(cls, read: FlagSource, write: FlagSource, execute: FlagSource, logger: Optional[Logger] = None) -> 'FileAccessPermission':
        permission = cls(logger=logger)
        permission.assign(read, write, execute)
        return permission

    @property
    def read(self) -> Property[bool]:
        return self._read

    @property
    def write(self) -> Property[bool]:
        return self._write

    @property
    def execute(self) -> Property[bool]:
        return self._execute

    def get_read(self) -> Property[bool]:
        return self._read

    def get_write(self) -> Property[bool]:
        return self._write

    def get_execute(self) -> Property[bool]:
        return self._execute

    def has_task_dependencies(self) -> bool:
        # Flags can be reassigned until first read, so this is never cached
        return has_task_dependency(self._read) or has_task_dependency(self._write) or has_task_dependency(self._execute)

    def unix(self, permission: Union[UnixEncoding, Provider[UnixEncoding]], index: ClassIndex) -> None:
        '''Set all three flags from the slice of `permission` belonging to user class `index`'''
        self.assign(*codec.decode_unix(permission, index, self._logger))

    def ensure_mutable(self) -> None:
        if self._read.is_finalized or self._write.is_finalized or self._execute.is_finalized:
            raise PropertyFinalized

    def assign(self, read: FlagSource, write: FlagSource, execute: FlagSource) -> None:
        '''Replace all three flags, or none of them if any flag has already been pinned'''
        self.ensure_mutable()
        self._read.set(read)
        self._write.set(write)
        self._execute.set(execute)

    def to_unix_numeric(self) -> Provider[int]:
        '''Converts the permission to one octal digit, 0 to 7.

        Resolved immediately when no flag depends on pending work, otherwise the digit is composed
        lazily and none of the flags are resolved here.
        '''
        if self.has_task_dependencies():
            if self._logger:
                self._logger.log(Severity.TRACE, LogAuthor.PERMISSION_TRIAD, LogType.RESOLUTION,
                                 'Numeric permission deferred until upstream tasks execute')
            return (self._read.map(_read_weight)
                    .zip(self._write.map(_write_weight), operator.add)
                    .zip(self._execute.map(_execute_weight), operator.add))

        return ValueProvider(codec.encode_numeric(self._read.get(), self._write.get(), self._execute.get()))

    def to_unix_symbolic(self) -> Provider[str]:
        if self.has_task_dependencies():
            return (self._read.map(_read_symbol)
                    .zip(self._write.map(_write_symbol), operator.concat)
                    .zip(self._execute.map(_execute_symbol), operator.concat))

        return ValueProvider(codec.encode_symbolic(self._read.get(), self._write.get(), self._execute.get()))

    def __repr__(self) -> str:
        # Peek at the sources directly, reading the properties would finalise them
        sources = (self._read.source, self._write.source, self._execute.source)
        if any(source is None for source in sources):
            return f'<{self.__class__.__name__} <unset>>'
        if self.has_task_dependencies():
            return f'<{self.__class__.__name__} <deferred>>'
        return f'<{self.__class__.__name__} {codec.encode_symbolic(*(source.get() for source in sources))}>'
