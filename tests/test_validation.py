import pytest

from tableconf.errors import (
    CannotModifyPropertyError,
    InvalidConfigurationValueError,
    UnknownConfigurationError,
)
from tableconf.metadata import Metadata
from tableconf.properties import CHECKPOINT_INTERVAL, TableProperty
from tableconf.registry import PropertyRegistry, build_registry
from tableconf.validation import validate_properties


def test_valid_properties_are_returned_under_canonical_keys(registry: PropertyRegistry):
    validated = validate_properties(
        {
            'DELTA.CHECKPOINTINTERVAL': '20',
            'delta.columnmapping.MODE': 'id',
            'delta.enableIcebergCompatV2': 'TRUE',
        },
        registry,
    )

    assert validated == {
        'delta.checkpointInterval': '20',
        'delta.columnMapping.mode': 'id',
        'delta.enableIcebergCompatV2': 'TRUE',
    }


def test_unprefixed_properties_pass_through(registry: PropertyRegistry):
    validated = validate_properties({'custom.Foo': 'Bar', 'owner': ''}, registry)
    assert validated == {'custom.foo': 'Bar', 'owner': ''}


def test_invalid_value_is_rejected(registry: PropertyRegistry):
    with pytest.raises(InvalidConfigurationValueError) as excinfo:
        validate_properties({'delta.checkpointInterval': '0'}, registry)

    assert excinfo.value.key == 'delta.checkpointInterval'
    assert excinfo.value.value == '0'


def test_unparseable_value_is_rejected(registry: PropertyRegistry):
    with pytest.raises(InvalidConfigurationValueError):
        validate_properties({'delta.columnMapping.mode': 'position'}, registry)
    with pytest.raises(InvalidConfigurationValueError):
        validate_properties({'delta.logRetentionDuration': '1 year'}, registry)


def test_unknown_property_is_rejected(registry: PropertyRegistry):
    with pytest.raises(UnknownConfigurationError) as excinfo:
        validate_properties({'delta.unknownThing': 'x'}, registry)
    assert excinfo.value.key == 'delta.unknownThing'


@pytest.mark.parametrize('value', ['5', '-5', 'not-a-number'])
def test_non_editable_property_is_rejected_regardless_of_value(
    registry: PropertyRegistry, value: str
):
    with pytest.raises(CannotModifyPropertyError) as excinfo:
        validate_properties({'delta.columnMapping.maxColumnId': value}, registry)
    assert excinfo.value.key == 'delta.columnMapping.maxColumnId'


def test_first_offending_entry_wins(registry: PropertyRegistry):
    with pytest.raises(UnknownConfigurationError):
        validate_properties(
            {'delta.nope': 'x', 'delta.checkpointInterval': '0'},
            registry,
        )
    with pytest.raises(InvalidConfigurationValueError):
        validate_properties(
            {'delta.checkpointInterval': '0', 'delta.nope': 'x'},
            registry,
        )


def test_input_is_not_modified(registry: PropertyRegistry):
    properties = {'DELTA.CHECKPOINTINTERVAL': '20'}
    validate_properties(properties, registry)
    assert properties == {'DELTA.CHECKPOINTINTERVAL': '20'}


def test_uses_default_registry_when_none_given():
    assert validate_properties({'Delta.CheckpointInterval': '5'}) == {
        'delta.checkpointInterval': '5'
    }


def test_custom_registry():
    prop: TableProperty[str] = TableProperty(
        key='delta.appendOnly',
        default_value='false',
        parse=str,
        validator=lambda value: value in ('true', 'false'),
        help_message='needs to be a boolean.',
        editable=True,
    )
    registry = build_registry([prop])

    assert validate_properties({'delta.appendonly': 'true'}, registry) == {
        'delta.appendOnly': 'true'
    }
    with pytest.raises(UnknownConfigurationError):
        validate_properties({'delta.checkpointInterval': '5'}, registry)


def test_validated_batch_merges_into_metadata(registry: PropertyRegistry):
    metadata = Metadata('table-id', {'delta.checkpointInterval': '10', 'owner': 'a'})
    validated = validate_properties({'DELTA.checkpointInterval': '50'}, registry)

    updated = metadata.with_new_configuration(validated)

    assert CHECKPOINT_INTERVAL.read_from(updated) == 50
    assert dict(updated.configuration) == {'delta.checkpointInterval': '50', 'owner': 'a'}
    assert CHECKPOINT_INTERVAL.read_from(metadata) == 10


def test_interval_outside_long_range_is_rejected(registry: PropertyRegistry):
    with pytest.raises(InvalidConfigurationValueError) as excinfo:
        validate_properties(
            {'delta.logRetentionDuration': 'interval 99999999999999999999 weeks'},
            registry,
        )

    assert excinfo.value.key == 'delta.logRetentionDuration'
    assert isinstance(excinfo.value.__cause__, ValueError)
