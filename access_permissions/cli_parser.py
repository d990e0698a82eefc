import argparse
from typing import Optional, Sequence

from models.flags import UserClass

__all__ = ('PARSER', 'parse_args')

def _parse_encoding_arg(arg: str) -> str:
    if not (arg:=arg.strip()):
        raise ValueError('Empty permission encoding given')
    return arg

def _parse_user_class_arg(arg: str) -> UserClass:
    arg = arg.strip().upper()
    if arg.isnumeric():
        return UserClass(int(arg))
    try:
        return UserClass[arg]
    except KeyError:
        raise ValueError(f'Unknown user class {arg}, must be one of: {", ".join(UserClass._member_names_).lower()}') from None

PARSER: argparse.ArgumentParser = argparse.ArgumentParser(prog='access_permissions',
                                                          description='Decode a numeric ("754") or symbolic ("rwxr-xr--") Unix permission')
### CLI arguments ###
PARSER.add_argument('encoding',
                    help='Numeric or symbolic Unix permission',
                    type=_parse_encoding_arg)

PARSER.add_argument('--user-class', '-u',
                    help='Only show the permission of this user class (owner, group, other or 0-2)',
                    required=False, type=_parse_user_class_arg, default=None)

PARSER.add_argument('--json', '-j',
                    help='Emit JSON instead of a table',
                    action='store_true')

PARSER.add_argument('--config', '-c',
                    help='Path to an alternative permissions_config.toml',
                    required=False, default=None)

def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    return PARSER.parse_args(argv)
