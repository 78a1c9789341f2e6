# pyright: reportUnusedImport=false
from tableconf.column_mapping import ColumnMappingMode
from tableconf.container import TableConfigContainer, default_registry
from tableconf.errors import (
    CannotModifyPropertyError,
    InvalidConfigurationValueError,
    MissingConfigurationError,
    PropertiesFileError,
    TableConfigError,
    UnknownConfigurationError,
)
from tableconf.metadata import HasConfiguration, Metadata
from tableconf.properties import (
    ALL_PROPERTIES,
    CHECKPOINT_INTERVAL,
    COLUMN_MAPPING_MAX_COLUMN_ID,
    COLUMN_MAPPING_MODE,
    EXPIRED_LOG_CLEANUP_ENABLED,
    ICEBERG_COMPAT_V2_ENABLED,
    IN_COMMIT_TIMESTAMP_ENABLEMENT_TIMESTAMP,
    IN_COMMIT_TIMESTAMP_ENABLEMENT_VERSION,
    IN_COMMIT_TIMESTAMPS_ENABLED,
    LOG_RETENTION,
    TOMBSTONE_RETENTION,
    PropertyHandle,
    TableProperty,
)
from tableconf.registry import PropertyRegistry, build_registry
from tableconf.validation import RESERVED_PREFIX, validate_properties
