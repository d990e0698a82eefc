'''Unix file access permissions with deferred resolution'''
from access_permissions.errors import (FormatError, InvalidEncodingError, InvalidEncodingLength, InvalidSymbolError,
                                       InvalidUnixPermission, PermissionException, ValidationError)
from access_permissions.triad import FileAccessPermission
from access_permissions.file_permissions import FileAccessPermissions

__all__ = ('FileAccessPermission', 'FileAccessPermissions',
           'PermissionException', 'FormatError', 'InvalidEncodingError', 'InvalidSymbolError', 'InvalidEncodingLength',
           'ValidationError', 'InvalidUnixPermission')
