import re
from pathlib import Path
from typing import Annotated, Final, Optional

from models.constants import ENCODING_CONSTANTS

from pydantic import BaseModel, BeforeValidator, Field, field_validator
from typing_extensions import Self

__all__ = ('PermissionsConfig',)

_NUMERIC_REGEX: Final[re.Pattern[str]] = re.compile(rf'^[0-7]{{{ENCODING_CONSTANTS.numeric_length}}}$')
_SYMBOLIC_SLICE: Final[str] = (f'[{ENCODING_CONSTANTS.symbols.read}{ENCODING_CONSTANTS.symbols.unset}]'
                               f'[{ENCODING_CONSTANTS.symbols.write}{ENCODING_CONSTANTS.symbols.unset}]'
                               f'[{ENCODING_CONSTANTS.symbols.execute}{ENCODING_CONSTANTS.symbols.unset}]')
_SYMBOLIC_REGEX: Final[re.Pattern[str]] = re.compile(rf'^(?:{_SYMBOLIC_SLICE}){{{ENCODING_CONSTANTS.numeric_length}}}$')

class PermissionsConfig(BaseModel):
    # Logging
    log_batch_size: Annotated[int, Field(ge=1)]
    log_queue_size: Annotated[int, Field(ge=1)]
    log_min_severity: Annotated[int, Field(ge=1, le=5, default=1)]
    log_filepath: Annotated[Optional[Path], Field(default=None)]

    # Defaults
    default_file_permissions: Annotated[str, Field(frozen=True), BeforeValidator(lambda permissions : str(permissions).strip())]
    default_directory_permissions: Annotated[str, Field(frozen=True), BeforeValidator(lambda permissions : str(permissions).strip())]

    @field_validator('default_file_permissions', 'default_directory_permissions', mode='after')
    @classmethod
    def validate_unix_encoding(cls, permissions: str) -> str:
        if not (_NUMERIC_REGEX.match(permissions) or _SYMBOLIC_REGEX.match(permissions)):
            raise ValueError(f'Permission ({permissions}) must be {ENCODING_CONSTANTS.numeric_length} octal digits or a {ENCODING_CONSTANTS.symbolic_length} character symbolic string')
        return permissions

    def finalise_log_filepath(self, root: Path) -> Self:
        if self.log_filepath and not self.log_filepath.is_absolute():
            self.log_filepath = root / self.log_filepath
        return self
