'''Module containing IntFlags for Unix permission bits and user class indices'''
from enum import IntEnum, IntFlag

__all__ = ('UnixPermissionFlags', 'UserClass')

class UnixPermissionFlags(IntFlag):
    '''Bit weights of a single octal permission digit'''
    EXECUTE = 0b001
    WRITE   = 0b010
    READ    = 0b100

    ALL     = 0b111

class UserClass(IntEnum):
    '''User classes, in the order they appear in numeric and symbolic encodings'''
    OWNER   = 0
    GROUP   = 1
    OTHER   = 2
