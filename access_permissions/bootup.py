'''Helper module for loading configuration and shared instances'''
import os
from pathlib import Path
from typing import Any, Final, Optional, Union

from access_permissions.config import PermissionsConfig
from access_permissions.file_permissions import FileAccessPermissions
from access_permissions.logging import LogSink, Logger, Severity, StreamSink

from dotenv import load_dotenv
import pytomlpp

__all__ = ('CONFIG_ENV_VAR',
           'create_permissions_config',
           'create_logger',
           'create_default_permissions')

CONFIG_ENV_VAR: Final[str] = 'ACCESS_PERMISSIONS_CONFIG'

def create_permissions_config(filepath: Optional[Union[str, os.PathLike]] = None) -> PermissionsConfig:
    package_root: Final[Path] = Path(__file__).parent
    load_dotenv(package_root.joinpath('.env'))

    config_filepath = filepath or os.environ.get(CONFIG_ENV_VAR) or package_root.joinpath('config', 'permissions_config.toml')
    loaded_constants: dict[str, Any] = pytomlpp.load(Path(config_filepath))

    flattened_dict: dict[str, Any] = {}
    leftover_mappings: list[dict[str, Any]] = [loaded_constants]
    while leftover_mappings:
        mapping = leftover_mappings.pop()
        for k, v in mapping.items():
            if isinstance(v, dict):
                leftover_mappings.append(mapping[k])
                continue
            flattened_dict.update({k:v})

    permissions_config: Final[PermissionsConfig] = PermissionsConfig.model_validate(flattened_dict)
    return permissions_config.finalise_log_filepath(package_root)

def create_logger(config: PermissionsConfig, sink: Optional[LogSink] = None) -> Logger:
    if not sink:
        sink = StreamSink(config.log_filepath)
    return Logger(batch_size=config.log_batch_size,
                  max_queue_size=config.log_queue_size,
                  min_severity=Severity(config.log_min_severity),
                  sink=sink)

def create_default_permissions(config: PermissionsConfig, directory: bool = False, logger: Optional[Logger] = None) -> FileAccessPermissions:
    return FileAccessPermissions.of(config.default_directory_permissions if directory else config.default_file_permissions,
                                    logger=logger)
