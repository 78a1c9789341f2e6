from logging import getLogger
from types import MappingProxyType
from typing import Iterable, Iterator, Mapping

from tableconf.properties import ALL_PROPERTIES, PropertyHandle

_logger = getLogger(__name__)


class PropertyRegistry(Mapping[str, PropertyHandle]):
    """Read-only mapping from lower-cased property key to its descriptor.

    The registry never changes after construction, so a single instance can
    be shared freely between threads.
    """

    _properties: Mapping[str, PropertyHandle]

    def __init__(self, properties: Iterable[PropertyHandle]) -> None:
        entries: dict[str, PropertyHandle] = {}
        for prop in properties:
            normalized = prop.get_key().lower()
            if normalized in entries:
                raise RuntimeError(f'Table property "{prop.get_key()}" already registered.')
            entries[normalized] = prop

        self._properties = MappingProxyType(entries)

    def lookup(self, normalized_key: str) -> PropertyHandle | None:
        """Return the descriptor for ``normalized_key``, which must already be lower case."""

        return self._properties.get(normalized_key)

    def __getitem__(self, key: str) -> PropertyHandle:
        return self._properties[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._properties)

    def __len__(self) -> int:
        return len(self._properties)

    def __repr__(self) -> str:
        return f'{type(self).__name__}({list(self._properties)!r})'


def build_registry(properties: Iterable[PropertyHandle] = ALL_PROPERTIES) -> PropertyRegistry:
    """Build a registry from a fixed set of table property descriptors.

    Parameters
    ----------
    properties : Iterable[PropertyHandle]
        The descriptors to register, by default every known table property.

    Returns
    -------
    PropertyRegistry
        The immutable registry.

    Raises
    ------
    RuntimeError
        When two descriptors share a key, ignoring case.
    """

    registry = PropertyRegistry(properties)
    _logger.debug('Built table property registry with %d properties', len(registry))
    return registry
