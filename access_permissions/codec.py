'''Conversion between permission triads and their numeric and symbolic Unix encodings.

A composite encoding is either `ENCODING_CONSTANTS.numeric_length` octal digits ("754"), one per
user class, or `ENCODING_CONSTANTS.symbolic_length` symbols ("rwxr-xr--") sliced into one
`class_width` segment per class. The form is chosen purely by length.
'''
import re
from functools import partial
from typing import Callable, Final, Optional, TYPE_CHECKING, Union

from access_permissions.errors import FormatError, InvalidEncodingError, InvalidEncodingLength, InvalidSymbolError, InvalidUnixPermission
from access_permissions.logging import LogAuthor, Logger, LogType, Severity

from models.constants import ENCODING_CONSTANTS
from models.flags import UnixPermissionFlags, UserClass
from models.typing import ClassIndex, UnixEncoding, UnixNumeric

from providers import Provider, ValueProvider, has_task_dependency

if TYPE_CHECKING: assert ENCODING_CONSTANTS

__all__ = ('is_read',
           'is_write',
           'is_execute',
           'is_read_symbolic',
           'is_write_symbolic',
           'is_execute_symbolic',
           'to_unix_numeric_permissions',
           'to_user_class',
           'encode_numeric',
           'encode_symbolic',
           'decode',
           'decode_unix')

NumericDecoder = Callable[[UnixNumeric], bool]
SymbolicDecoder = Callable[[UnixEncoding], bool]

_OCTAL_DIGIT_REGEX: Final[re.Pattern[str]] = re.compile(r'^[0-7]$')

# Symbol expected at each fixed position of a symbolic slice
_SYMBOL_POSITIONS: Final[dict[UnixPermissionFlags, tuple[int, str]]] = {
    UnixPermissionFlags.READ : (0, ENCODING_CONSTANTS.symbols.read),
    UnixPermissionFlags.WRITE : (1, ENCODING_CONSTANTS.symbols.write),
    UnixPermissionFlags.EXECUTE : (2, ENCODING_CONSTANTS.symbols.execute),
}

def is_read(unix_numeric: UnixNumeric) -> bool:
    return bool(unix_numeric & UnixPermissionFlags.READ)

def is_write(unix_numeric: UnixNumeric) -> bool:
    return bool(unix_numeric & UnixPermissionFlags.WRITE)

def is_execute(unix_numeric: UnixNumeric) -> bool:
    return bool(unix_numeric & UnixPermissionFlags.EXECUTE)

def _is_set_symbolic(unix_symbolic: UnixEncoding, flag: UnixPermissionFlags) -> bool:
    position, expected = _SYMBOL_POSITIONS[flag]
    symbol: str = unix_symbolic[position]
    if symbol == expected:
        return True
    elif symbol == ENCODING_CONSTANTS.symbols.unset:
        return False
    raise InvalidSymbolError(symbol=symbol, flag=flag, expected=expected, unset=ENCODING_CONSTANTS.symbols.unset)

def is_read_symbolic(unix_symbolic: UnixEncoding) -> bool:
    return _is_set_symbolic(unix_symbolic, UnixPermissionFlags.READ)

def is_write_symbolic(unix_symbolic: UnixEncoding) -> bool:
    return _is_set_symbolic(unix_symbolic, UnixPermissionFlags.WRITE)

def is_execute_symbolic(unix_symbolic: UnixEncoding) -> bool:
    return _is_set_symbolic(unix_symbolic, UnixPermissionFlags.EXECUTE)

def to_unix_numeric_permissions(permissions: str) -> UnixNumeric:
    # int(..., 8) alone would also accept signs, whitespace and underscores
    if not isinstance(permissions, str) or not _OCTAL_DIGIT_REGEX.match(permissions):
        raise InvalidEncodingError(raw=permissions)
    return int(permissions, ENCODING_CONSTANTS.octal_base)

def to_user_class(index: ClassIndex) -> UserClass:
    if isinstance(index, bool) or not isinstance(index, int):
        raise ValueError(f'User class index must be an integer, got {type(index).__name__}')
    try:
        return UserClass(index)
    except ValueError:
        raise ValueError(f'User class index must be one of {[user_class.value for user_class in UserClass]}, got ({index})') from None

def encode_numeric(read: bool, write: bool, execute: bool) -> UnixNumeric:
    return ((UnixPermissionFlags.READ if read else 0)
            + (UnixPermissionFlags.WRITE if write else 0)
            + (UnixPermissionFlags.EXECUTE if execute else 0))

def encode_symbolic(read: bool, write: bool, execute: bool) -> UnixEncoding:
    unset: str = ENCODING_CONSTANTS.symbols.unset
    return ''.join((ENCODING_CONSTANTS.symbols.read if read else unset,
                    ENCODING_CONSTANTS.symbols.write if write else unset,
                    ENCODING_CONSTANTS.symbols.execute if execute else unset))

def _decode_encoding(permission: UnixEncoding,
                     user_class: UserClass,
                     numeric_decoder: NumericDecoder,
                     symbolic_decoder: SymbolicDecoder) -> bool:
    # Recorded by `Provider.map` for deferred encodings, so it must stay free of side effects
    try:
        if not isinstance(permission, str):
            raise InvalidEncodingError(raw=permission)
        if len(permission) == ENCODING_CONSTANTS.numeric_length:
            return numeric_decoder(to_unix_numeric_permissions(permission[user_class]))
        if len(permission) != ENCODING_CONSTANTS.symbolic_length:
            raise InvalidEncodingLength(raw=permission,
                                        numeric_length=ENCODING_CONSTANTS.numeric_length,
                                        symbolic_length=ENCODING_CONSTANTS.symbolic_length)

        width: int = ENCODING_CONSTANTS.class_width
        return symbolic_decoder(permission[width * user_class : width * (user_class + 1)])
    except FormatError as cause:
        raise InvalidUnixPermission(encoding=permission, cause=cause) from cause

def _decode_now(decoder: Callable[[UnixEncoding], bool], permission: UnixEncoding, logger: Optional[Logger]) -> bool:
    try:
        return decoder(permission)
    except InvalidUnixPermission as invalid_permission:
        if logger:
            logger.log(Severity.ERROR, LogAuthor.CODEC, LogType.ENCODING, invalid_permission.description)
        raise

def decode(permission: Union[UnixEncoding, Provider[UnixEncoding]],
           index: ClassIndex,
           numeric_decoder: NumericDecoder,
           symbolic_decoder: SymbolicDecoder,
           logger: Optional[Logger] = None) -> Provider[bool]:
    '''Decode one flag of one user class out of a composite encoding.

    An encoding that is already available is decoded and validated right away, so malformed input
    is reported (and logged) at this point. An encoding that still depends on a pending task is
    only composed onto: the returned provider decodes, and may raise, every time it is resolved,
    without logging.
    '''
    user_class: UserClass = to_user_class(index)
    decoder = partial(_decode_encoding,
                      user_class=user_class,
                      numeric_decoder=numeric_decoder,
                      symbolic_decoder=symbolic_decoder)

    if not isinstance(permission, Provider):
        return ValueProvider(_decode_now(decoder, permission, logger))
    if not has_task_dependency(permission):
        return ValueProvider(_decode_now(decoder, permission.get(), logger))
    return permission.map(decoder)

def decode_unix(permission: Union[UnixEncoding, Provider[UnixEncoding]],
                index: ClassIndex,
                logger: Optional[Logger] = None) -> tuple[Provider[bool], Provider[bool], Provider[bool]]:
    '''Decode the (read, write, execute) flags of one user class'''
    return (decode(permission, index, is_read, is_read_symbolic, logger),
            decode(permission, index, is_write, is_write_symbolic, logger),
            decode(permission, index, is_execute, is_execute_symbolic, logger))
