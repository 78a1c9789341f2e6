import pytest

from tableconf.properties import ALL_PROPERTIES, CHECKPOINT_INTERVAL, TableProperty
from tableconf.registry import PropertyRegistry, build_registry


def test_registry_contains_every_property(registry: PropertyRegistry):
    assert len(registry) == len(ALL_PROPERTIES)
    for prop in ALL_PROPERTIES:
        assert registry[prop.key.lower()] is prop


def test_lookup_is_exact_on_lower_case_keys(registry: PropertyRegistry):
    assert registry.lookup('delta.checkpointinterval') is CHECKPOINT_INTERVAL
    assert registry.lookup('delta.checkpointInterval') is None
    assert registry.lookup('delta.unknown') is None


def test_duplicate_keys_fail_fast():
    duplicate: TableProperty[int] = TableProperty(
        key='DELTA.CHECKPOINTINTERVAL',
        default_value='1',
        parse=int,
        validator=lambda value: True,
        help_message='',
        editable=True,
    )

    with pytest.raises(RuntimeError):
        build_registry([CHECKPOINT_INTERVAL, duplicate])


def test_registry_is_read_only(registry: PropertyRegistry):
    with pytest.raises(TypeError):
        registry['delta.x'] = CHECKPOINT_INTERVAL  # type: ignore
    with pytest.raises(TypeError):
        registry._properties['delta.x'] = CHECKPOINT_INTERVAL  # type: ignore  # pyright: ignore[reportPrivateUsage]
