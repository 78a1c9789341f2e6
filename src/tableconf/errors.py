class TableConfigError(Exception):
    """Base class for errors raised while reading or validating table properties."""


class UnknownConfigurationError(TableConfigError):
    """Raised when a key in the reserved namespace is not a registered property."""

    def __init__(self, key: str) -> None:
        super().__init__(f'Unknown configuration was specified: {key}')
        self.key = key


class CannotModifyPropertyError(TableConfigError):
    """Raised when a registered property is not editable after table creation."""

    def __init__(self, key: str) -> None:
        super().__init__(f'The table property {key} cannot be modified')
        self.key = key


class InvalidConfigurationValueError(TableConfigError):
    """Raised when a property value fails to parse or fails its validator.

    Attributes
    ----------
    key:
        The canonical key of the property.
    value:
        The offending raw value.
    help_message:
        Description of the values the property accepts.
    """

    def __init__(self, key: str, value: str | None, help_message: str) -> None:
        message = f'Invalid value for table property \'{key}\': \'{value}\'.'
        if help_message:
            message += f' {key} {help_message}'
        super().__init__(message)
        self.key = key
        self.value = value
        self.help_message = help_message


class MissingConfigurationError(TableConfigError):
    """Raised when a required property has neither a value nor a default."""

    def __init__(self, key: str) -> None:
        super().__init__(f'No value or default for table property: {key}')
        self.key = key


class PropertiesFileError(TableConfigError):
    """Raised when a table properties file cannot be read or parsed."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f'Cannot load table properties from {path}: {reason}')
        self.path = path
        self.reason = reason
