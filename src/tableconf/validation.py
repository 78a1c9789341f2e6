from logging import getLogger
from typing import Mapping

from tableconf.errors import CannotModifyPropertyError, UnknownConfigurationError
from tableconf.registry import PropertyRegistry

RESERVED_PREFIX = 'delta.'

_logger = getLogger(__name__)


def validate_properties(
    new_properties: Mapping[str, str], registry: PropertyRegistry | None = None
) -> dict[str, str]:
    """Validate table properties a transaction is about to write.

    Keys carrying the ``delta.`` prefix must name a registered, editable
    property whose value parses and passes its validator; they are stored
    under the property's canonical key. Any other key is lower-cased and
    passed through without validation. Values are never rewritten.

    Entries are checked in iteration order and the first offending entry
    aborts the whole batch.

    Parameters
    ----------
    new_properties : Mapping[str, str]
        The proposed properties, with keys in any casing.
    registry : PropertyRegistry | None
        The registry to validate against, by default the process-wide
        registry.

    Returns
    -------
    dict[str, str]
        The normalized properties, ready to merge into the table metadata.

    Raises
    ------
    UnknownConfigurationError
        When a ``delta.`` key is not a registered property.
    CannotModifyPropertyError
        When a ``delta.`` key names a property that is not editable.
    InvalidConfigurationValueError
        When a value fails to parse or fails its validator.
    """
    if registry is None:
        # Deferred, the container module imports this one
        from tableconf.container import default_registry

        registry = default_registry()

    validated: dict[str, str] = {}
    for key, value in new_properties.items():
        normalized = key.lower()

        if not normalized.startswith(RESERVED_PREFIX):
            _logger.debug('Passing through unvalidated table property %s', normalized)
            validated[normalized] = value
            continue

        prop = registry.lookup(normalized)
        if prop is None:
            _logger.debug('Rejecting unknown table property %s', key)
            raise UnknownConfigurationError(key)
        if not prop.editable:
            _logger.debug('Rejecting change to non-editable table property %s', key)
            raise CannotModifyPropertyError(key)

        prop.validate_raw(value)
        validated[prop.get_key()] = value

    return validated
