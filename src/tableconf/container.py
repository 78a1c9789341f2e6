from dependency_injector import containers, providers

from tableconf import validation
from tableconf.registry import PropertyRegistry, build_registry


class TableConfigContainer(containers.DeclarativeContainer):
    """Wires the property registry into the validation pipeline.

    The registry is a singleton: built on first use and shared, read-only,
    for the lifetime of the container. Override ``registry`` to validate
    against a different set of properties.
    """

    registry = providers.Singleton(build_registry)

    validate_properties = providers.Callable(validation.validate_properties, registry=registry)


_container = TableConfigContainer()


def default_container() -> TableConfigContainer:
    return _container


def default_registry() -> PropertyRegistry:
    return _container.registry()
