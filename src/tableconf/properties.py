import re
from dataclasses import dataclass
from typing import Any, Callable, Generic, Mapping, Protocol, TypeVar

from tableconf.column_mapping import ColumnMappingMode
from tableconf.errors import InvalidConfigurationValueError, MissingConfigurationError
from tableconf.interval import parse_interval_as_millis
from tableconf.metadata import HasConfiguration

_INTEGER = re.compile(r'[+-]?\d+')

_INT_MIN, _INT_MAX = -(2**31), 2**31 - 1
_LONG_MIN, _LONG_MAX = -(2**63), 2**63 - 1

T = TypeVar('T')


class PropertyHandle(Protocol):
    '''String-level view of a table property, independent of its value type.'''

    @property
    def key(self) -> str: ...

    @property
    def editable(self) -> bool: ...

    def get_key(self) -> str: ...

    def validate_raw(self, value: str) -> None: ...


@dataclass(frozen=True)
class TableProperty(Generic[T]):
    """Descriptor of a single table property.

    A descriptor knows how to turn the raw string stored in table metadata
    into a typed value and whether that value is acceptable. Values are
    parsed on every read; nothing is cached on the descriptor.

    Attributes
    ----------
    key:
        Canonical key, including the ``delta.`` prefix.
    default_value:
        Raw default used when the key is absent, or ``None`` for no default.
    parse:
        Converts the raw string into a typed value, raising ``ValueError``
        on malformed input.
    validator:
        Predicate over the parsed value.
    help_message:
        Description of the accepted values, reported on validation failures.
    editable:
        Whether the property may be changed after table creation.
    optional:
        When true, a missing value without a default reads as ``None``
        instead of raising.
    """

    key: str
    default_value: str | None
    parse: Callable[[str], T]
    validator: Callable[[T], bool]
    help_message: str
    editable: bool
    optional: bool = False

    def get_key(self) -> str:
        return self.key

    def read_value(self, configuration: Mapping[str, str]) -> T:
        '''Return the typed value of this property from a configuration mapping.

        Parameters
        ----------
        configuration : Mapping[str, str]
            Table configuration keyed by canonical property key.

        Returns
        -------
        T
            The parsed value, or the parsed default when the key is absent.
            ``None`` for optional properties without a value or default.

        Raises
        ------
        InvalidConfigurationValueError
            When the value does not parse or fails the validator.
        MissingConfigurationError
            When a required property has neither a value nor a default.
        '''
        raw = configuration.get(self.key, self.default_value)
        if raw is None:
            if self.optional:
                return None  # type: ignore[return-value]
            raise MissingConfigurationError(self.key)

        return self._parse_and_validate(raw)

    def read_from(self, metadata: HasConfiguration) -> T:
        return self.read_value(metadata.configuration)

    def validate_raw(self, value: str) -> None:
        self._parse_and_validate(value)

    def _parse_and_validate(self, raw: str) -> T:
        try:
            parsed = self.parse(raw)
        except ValueError as ex:
            raise InvalidConfigurationValueError(self.key, raw, self.help_message) from ex

        if not self.validator(parsed):
            raise InvalidConfigurationValueError(self.key, raw, self.help_message)
        return parsed


def _parse_integer(value: str, lower: int, upper: int) -> int:
    if not _INTEGER.fullmatch(value):
        raise ValueError(f'Not an integer: {value!r}')

    parsed = int(value)
    if not lower <= parsed <= upper:
        raise ValueError(f'Integer out of range: {value}')
    return parsed


def parse_int(value: str) -> int:
    return _parse_integer(value, _INT_MIN, _INT_MAX)


def parse_long(value: str) -> int:
    return _parse_integer(value, _LONG_MIN, _LONG_MAX)


def parse_optional_long(value: str | None) -> int | None:
    if value is None:
        return None
    return parse_long(value)


def parse_bool(value: str) -> bool:
    low = value.lower()
    if low == 'true':
        return True
    if low == 'false':
        return False
    raise ValueError(f'Not a boolean: {value!r}')


def _always(_: object) -> bool:
    return True


_INTERVAL_HELP = (
    'needs to be provided as a calendar interval such as \'2 weeks\'. Months '
    'and years are not accepted. You may specify \'365 days\' for a year instead.'
)

# The shortest duration logically deleted data files are kept around before
# they are physically deleted.
TOMBSTONE_RETENTION: TableProperty[int] = TableProperty(
    key='delta.deletedFileRetentionDuration',
    default_value='interval 1 week',
    parse=parse_interval_as_millis,
    validator=lambda value: value >= 0,
    help_message=_INTERVAL_HELP,
    editable=True,
)

# A checkpoint is suggested every N commits to the log.
CHECKPOINT_INTERVAL: TableProperty[int] = TableProperty(
    key='delta.checkpointInterval',
    default_value='10',
    parse=parse_int,
    validator=lambda value: value > 0,
    help_message='needs to be a positive integer.',
    editable=True,
)

# The shortest duration delta and checkpoint files are kept around.
LOG_RETENTION: TableProperty[int] = TableProperty(
    key='delta.logRetentionDuration',
    default_value='interval 30 days',
    parse=parse_interval_as_millis,
    validator=_always,
    help_message=_INTERVAL_HELP,
    editable=True,
)

EXPIRED_LOG_CLEANUP_ENABLED: TableProperty[bool] = TableProperty(
    key='delta.enableExpiredLogCleanup',
    default_value='true',
    parse=parse_bool,
    validator=_always,
    help_message='needs to be a boolean.',
    editable=True,
)

# Commit metadata carries a monotonically increasing timestamp when enabled.
IN_COMMIT_TIMESTAMPS_ENABLED: TableProperty[bool] = TableProperty(
    key='delta.enableInCommitTimestamps',
    default_value='false',
    parse=parse_bool,
    validator=_always,
    help_message='needs to be a boolean.',
    editable=True,
)

IN_COMMIT_TIMESTAMP_ENABLEMENT_VERSION: TableProperty[int | None] = TableProperty(
    key='delta.inCommitTimestampEnablementVersion',
    default_value=None,
    parse=parse_optional_long,
    validator=_always,
    help_message='needs to be a long.',
    editable=True,
    optional=True,
)

# In-commit timestamp of the commit at IN_COMMIT_TIMESTAMP_ENABLEMENT_VERSION.
IN_COMMIT_TIMESTAMP_ENABLEMENT_TIMESTAMP: TableProperty[int | None] = TableProperty(
    key='delta.inCommitTimestampEnablementTimestamp',
    default_value=None,
    parse=parse_optional_long,
    validator=_always,
    help_message='needs to be a long.',
    editable=True,
    optional=True,
)

COLUMN_MAPPING_MODE: TableProperty[ColumnMappingMode] = TableProperty(
    key='delta.columnMapping.mode',
    default_value='none',
    parse=ColumnMappingMode.from_config_string,
    validator=_always,
    help_message='needs to be one of none, id, name.',
    editable=True,
)

# Assigned by the engine when columns are added, never by users.
COLUMN_MAPPING_MAX_COLUMN_ID: TableProperty[int] = TableProperty(
    key='delta.columnMapping.maxColumnId',
    default_value='0',
    parse=parse_long,
    validator=lambda value: value >= 0,
    help_message='needs to be a non-negative long.',
    editable=False,
)

ICEBERG_COMPAT_V2_ENABLED: TableProperty[bool] = TableProperty(
    key='delta.enableIcebergCompatV2',
    default_value='false',
    parse=parse_bool,
    validator=_always,
    help_message='needs to be a boolean.',
    editable=True,
)

ALL_PROPERTIES: tuple[TableProperty[Any], ...] = (
    TOMBSTONE_RETENTION,
    CHECKPOINT_INTERVAL,
    LOG_RETENTION,
    EXPIRED_LOG_CLEANUP_ENABLED,
    IN_COMMIT_TIMESTAMPS_ENABLED,
    IN_COMMIT_TIMESTAMP_ENABLEMENT_VERSION,
    IN_COMMIT_TIMESTAMP_ENABLEMENT_TIMESTAMP,
    COLUMN_MAPPING_MODE,
    COLUMN_MAPPING_MAX_COLUMN_ID,
    ICEBERG_COMPAT_V2_ENABLED,
)
