from enum import Enum


class ColumnMappingMode(Enum):
    '''How physical column names are resolved for a table.'''

    NONE = 'none'
    ID = 'id'
    NAME = 'name'

    @classmethod
    def from_config_string(cls, raw: str) -> 'ColumnMappingMode':
        for mode in cls:
            if mode.value == raw.lower():
                return mode

        raise ValueError(
            f'Invalid column mapping mode: {raw}, '
            f'supported modes: {", ".join(mode.value for mode in cls)}'
        )

    def __str__(self) -> str:
        return self.value
