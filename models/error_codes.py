from enum import Enum

__all__ = ('FormatErrorCodes', 'ValidationErrorCodes')

class FormatErrorCodes(Enum):
    INVALID_OCTAL_DIGIT = "2:oct"
    INVALID_SYMBOL = "2:sym"
    INVALID_LENGTH = "2:len"

class ValidationErrorCodes(Enum):
    INVALID_UNIX_PERMISSION = "2:perm"
