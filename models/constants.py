from pathlib import Path
from typing import Annotated, Any, Optional

import pytomlpp
from pydantic import BaseModel, Field, model_validator
from typing_extensions import Self

__all__ = ('SymbolConstants', 'EncodingConstants', 'ENCODING_CONSTANTS', 'load_constants')

class SymbolConstants(BaseModel):
    read: Annotated[str, Field(frozen=True, min_length=1, max_length=1)]
    write: Annotated[str, Field(frozen=True, min_length=1, max_length=1)]
    execute: Annotated[str, Field(frozen=True, min_length=1, max_length=1)]
    unset: Annotated[str, Field(frozen=True, min_length=1, max_length=1)]

    @model_validator(mode='after')
    def validate_distinct_symbols(self) -> Self:
        if len({self.read, self.write, self.execute, self.unset}) != 4:
            raise ValueError('Permission symbols must be distinct from each other and from the unset symbol')
        return self

class EncodingConstants(BaseModel):
    octal_base: Annotated[int, Field(frozen=True, ge=2)]
    numeric_length: Annotated[int, Field(frozen=True, ge=1)]
    symbolic_length: Annotated[int, Field(frozen=True, ge=1)]
    class_width: Annotated[int, Field(frozen=True, ge=1)]
    max_numeric: Annotated[int, Field(frozen=True, ge=0)]
    max_mode: Annotated[int, Field(frozen=True, ge=0)]
    symbols: SymbolConstants

    @model_validator(mode='after')
    def validate_slicing(self) -> Self:
        if self.numeric_length * self.class_width != self.symbolic_length:
            raise ValueError(f'Symbolic length ({self.symbolic_length}) must cover {self.numeric_length} classes of width {self.class_width}')
        return self

ENCODING_CONSTANTS: Optional[EncodingConstants] = None

def load_constants(filepath: Optional[Path] = None) -> EncodingConstants:
    global ENCODING_CONSTANTS

    loaded_constants: dict[str, Any] = pytomlpp.load(filepath or Path(__file__).parent.joinpath('constants.toml'))
    ENCODING_CONSTANTS = EncodingConstants.model_validate(loaded_constants['encoding'])

    return ENCODING_CONSTANTS

load_constants()
