'''Typing utilities for permission encodings'''
from typing import TypeAlias, Union

from models.flags import UserClass

UnixNumeric:        TypeAlias = int
UnixEncoding:       TypeAlias = str
ClassIndex:         TypeAlias = Union[UserClass, int]
