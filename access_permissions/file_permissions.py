'''Owner, group and other permissions of a file, as a whole'''
import operator
from typing import Final, Optional, Union

from access_permissions import codec
from access_permissions.errors import InvalidEncodingError, InvalidUnixPermission
from access_permissions.logging import LogAuthor, Logger, LogType, Severity
from access_permissions.triad import FileAccessPermission

from models.constants import ENCODING_CONSTANTS
from models.flags import UserClass
from models.typing import UnixEncoding, UnixNumeric

from providers import Provider, ValueProvider

__all__ = ('FileAccessPermissions',)

# Numeric weight of one class digit within a full mode, i.e. 0o100, 0o10 and 0o1
_CLASS_WEIGHTS: Final[dict[UserClass, int]] = {
    user_class : ENCODING_CONSTANTS.octal_base ** (ENCODING_CONSTANTS.numeric_length - 1 - user_class)
    for user_class in UserClass
}

def _weighted(user_class: UserClass):
    weight: int = _CLASS_WEIGHTS[user_class]
    def transformer(digit: int) -> int:
        return digit * weight
    return transformer

class FileAccessPermissions:
    '''Permissions of the owner, group and other user classes.

    Accepts the same composite encodings as `chmod`: a 3-digit numeric string ("754"), a 9-character
    symbolic string ("rwxr-xr--"), an integer mode (0o754), or a provider of a string encoding.
    '''
    __slots__ = ('_owner', '_group', '_other', '_logger')

    def __init__(self, unix_numeric: UnixNumeric = 0, logger: Optional[Logger] = None):
        self._logger: Final[Optional[Logger]] = logger
        self._owner: Final[FileAccessPermission] = FileAccessPermission(logger=logger)
        self._group: Final[FileAccessPermission] = FileAccessPermission(logger=logger)
        self._other: Final[FileAccessPermission] = FileAccessPermission(logger=logger)
        self.unix(unix_numeric)

    @classmethod
    def of(cls, permissions: Union[UnixEncoding, UnixNumeric, Provider[UnixEncoding]], logger: Optional[Logger] = None) -> 'FileAccessPermissions':
        file_permissions = cls(logger=logger)
        file_permissions.unix(permissions)
        return file_permissions

    @property
    def owner(self) -> FileAccessPermission:
        return self._owner

    @property
    def user(self) -> FileAccessPermission:
        return self._owner

    @property
    def group(self) -> FileAccessPermission:
        return self._group

    @property
    def other(self) -> FileAccessPermission:
        return self._other

    def __getitem__(self, user_class: UserClass) -> FileAccessPermission:
        return (self._owner, self._group, self._other)[UserClass(user_class)]

    def unix(self, permissions: Union[UnixEncoding, UnixNumeric, Provider[UnixEncoding]]) -> None:
        if isinstance(permissions, bool):
            raise InvalidUnixPermission(encoding=permissions, cause=InvalidEncodingError(raw=permissions))
        if isinstance(permissions, int):
            if not (0 <= permissions <= ENCODING_CONSTANTS.max_mode):
                cause = InvalidEncodingError(raw=permissions, description=f'Integer mode must be between 0 and {oct(ENCODING_CONSTANTS.max_mode)}.')
                if self._logger:
                    self._logger.log(Severity.ERROR, LogAuthor.FILE_PERMISSIONS, LogType.ENCODING, cause.description)
                raise InvalidUnixPermission(encoding=oct(permissions), cause=cause)
            permissions = format(permissions, f'0{ENCODING_CONSTANTS.numeric_length}o')

        # Decode and check every class before touching any of them, so a failure leaves the mode as it was
        decoded = [codec.decode_unix(permissions, user_class, self._logger) for user_class in UserClass]
        for user_class in UserClass:
            self[user_class].ensure_mutable()
        for user_class, flags in zip(UserClass, decoded):
            self[user_class].assign(*flags)

    def has_task_dependencies(self) -> bool:
        return any(self[user_class].has_task_dependencies() for user_class in UserClass)

    def to_unix_numeric(self) -> Provider[int]:
        '''Full mode as an integer, e.g. 0o755 (493)'''
        if self.has_task_dependencies():
            return (self._owner.to_unix_numeric().map(_weighted(UserClass.OWNER))
                    .zip(self._group.to_unix_numeric().map(_weighted(UserClass.GROUP)), operator.add)
                    .zip(self._other.to_unix_numeric().map(_weighted(UserClass.OTHER)), operator.add))

        return ValueProvider(sum(self[user_class].to_unix_numeric().get() * _CLASS_WEIGHTS[user_class] for user_class in UserClass))

    def to_unix_symbolic(self) -> Provider[str]:
        if self.has_task_dependencies():
            return (self._owner.to_unix_symbolic()
                    .zip(self._group.to_unix_symbolic(), operator.concat)
                    .zip(self._other.to_unix_symbolic(), operator.concat))

        return ValueProvider(''.join(self[user_class].to_unix_symbolic().get() for user_class in UserClass))

    def to_octal_string(self) -> Provider[str]:
        return self.to_unix_numeric().map(lambda mode: format(mode, f'0{ENCODING_CONSTANTS.numeric_length}o'))

    def __repr__(self) -> str:
        return f'<{self.__class__.__name__} owner={self._owner!r} group={self._group!r} other={self._other!r}>'
