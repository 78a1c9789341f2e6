from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Mapping, Protocol


class HasConfiguration(Protocol):
    @property
    def configuration(self) -> Mapping[str, str]: ...


@dataclass(frozen=True)
class Metadata:
    """Table metadata as far as table properties are concerned.

    Only the configuration mapping is modelled; the rest of the table
    metadata (schema, partitioning, format) lives elsewhere.

    Attributes
    ----------
    id:
        Unique identifier of the table.
    configuration:
        The persisted table properties, keyed by canonical property key.
    """

    id: str
    configuration: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, 'configuration', MappingProxyType(dict(self.configuration)))

    def __hash__(self) -> int:
        # The configuration view is unhashable; equal metadata always shares an id
        return hash(self.id)

    def with_new_configuration(self, properties: Mapping[str, str]) -> 'Metadata':
        """Return a copy with ``properties`` merged over the current configuration."""

        return replace(self, configuration={**self.configuration, **properties})
