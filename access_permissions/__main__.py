import argparse
import sys
from typing import Any, Final, Optional, Sequence

from access_permissions import cli_parser
from access_permissions.bootup import create_logger, create_permissions_config
from access_permissions.config import PermissionsConfig
from access_permissions.errors import InvalidUnixPermission
from access_permissions.file_permissions import FileAccessPermissions
from access_permissions.logging import Logger

from models.flags import UserClass

import orjson

def describe(permissions: FileAccessPermissions, user_class: UserClass) -> dict[str, Any]:
    triad = permissions[user_class]
    return {'user_class' : user_class.name.lower(),
            'read' : triad.read.get(),
            'write' : triad.write.get(),
            'execute' : triad.execute.get(),
            'numeric' : triad.to_unix_numeric().get(),
            'symbolic' : triad.to_unix_symbolic().get()}

def main(argv: Optional[Sequence[str]] = None) -> int:
    '''Entrypoint function for the permission decoder'''
    args: argparse.Namespace = cli_parser.parse_args(argv)

    config: Final[PermissionsConfig] = create_permissions_config(args.config)
    logger: Final[Logger] = create_logger(config)

    try:
        permissions = FileAccessPermissions.of(args.encoding, logger=logger)
        user_classes = (args.user_class,) if args.user_class is not None else tuple(UserClass)
        descriptions: list[dict[str, Any]] = [describe(permissions, user_class) for user_class in user_classes]
    except InvalidUnixPermission as invalid_permission:
        print(invalid_permission.description, file=sys.stderr)
        return 2
    finally:
        logger.close()

    if args.json:
        sys.stdout.write(orjson.dumps({'mode' : permissions.to_octal_string().get(), 'classes' : descriptions}).decode() + '\n')
        return 0

    print(f'mode {permissions.to_octal_string().get()} ({permissions.to_unix_symbolic().get()})')
    for description in descriptions:
        print(f"{description['user_class']:<6} {description['symbolic']} {description['numeric']} "
              f"read={description['read']} write={description['write']} execute={description['execute']}")
    return 0

if __name__ == '__main__':
    sys.exit(main())
