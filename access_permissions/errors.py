from abc import ABC
from datetime import datetime
from typing import Optional

from models.error_codes import FormatErrorCodes, ValidationErrorCodes
from models.flags import UnixPermissionFlags

__all__ = ('PermissionException', 'FormatError', 'InvalidEncodingError', 'InvalidSymbolError', 'InvalidEncodingLength', 'ValidationError', 'InvalidUnixPermission')

class PermissionException(ABC, Exception):
    '''Abstract base exception class for all permission encoding failures. Carries a stable code and a message a user can act on'''
    code: str
    description: str
    exception_iso_timestamp: str

    def __init__(self, description: Optional[str] = None):
        self.description = description or self.__class__.description
        self.exception_iso_timestamp = datetime.now().isoformat()
        super().__init__(self.description)


# Malformed input
class FormatError(PermissionException, ValueError):
    '''Base class for input that does not follow the numeric or symbolic grammar'''

class InvalidEncodingError(FormatError):
    code: str = FormatErrorCodes.INVALID_OCTAL_DIGIT.value
    description: str = "Can't be parsed as octal number."

    def __init__(self, raw: object, description: Optional[str] = None):
        super().__init__(description or InvalidEncodingError.description)
        self.raw = raw

class InvalidSymbolError(FormatError):
    code: str = FormatErrorCodes.INVALID_SYMBOL.value
    description: str = "'{symbol}' is not a valid Unix permission {flag} flag, must be '{expected}' or '{unset}'."

    def __init__(self, symbol: str, flag: UnixPermissionFlags, expected: str, unset: str, description: Optional[str] = None):
        super().__init__((description or InvalidSymbolError.description).format(symbol=symbol, flag=flag.name, expected=expected, unset=unset))
        self.symbol = symbol
        self.flag = flag
        self.expected = (expected, unset)

class InvalidEncodingLength(FormatError):
    code: str = FormatErrorCodes.INVALID_LENGTH.value
    description: str = 'Must be either {numeric_length} octal digits or {symbolic_length} symbolic characters.'

    def __init__(self, raw: str, numeric_length: int, symbolic_length: int, description: Optional[str] = None):
        super().__init__((description or InvalidEncodingLength.description).format(numeric_length=numeric_length, symbolic_length=symbolic_length))
        self.raw = raw


# User facing
class ValidationError(PermissionException, ValueError):
    '''Base class for errors reported back to whoever supplied the permission'''

class InvalidUnixPermission(ValidationError):
    code: str = ValidationErrorCodes.INVALID_UNIX_PERMISSION.value
    description: str = "'{encoding}' isn't a proper Unix permission. {cause}"

    def __init__(self, encoding: object, cause: FormatError, description: Optional[str] = None):
        super().__init__((description or InvalidUnixPermission.description).format(encoding=encoding, cause=cause.description))
        self.encoding = encoding
        self.cause = cause
