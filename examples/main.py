from pathlib import Path

from tableconf import CHECKPOINT_INTERVAL, COLUMN_MAPPING_MODE, Metadata, TableConfigContainer
from tableconf.config import load_properties_file


def main() -> None:
    container = TableConfigContainer()

    proposed = load_properties_file(Path(__file__).parent / 'table.yaml')
    validated = container.validate_properties(proposed)

    metadata = Metadata('example-table').with_new_configuration(validated)
    print('checkpoint interval:', CHECKPOINT_INTERVAL.read_from(metadata))
    print('column mapping mode:', COLUMN_MAPPING_MODE.read_from(metadata))


if __name__ == '__main__':
    main()
