import json
from os import PathLike
from pathlib import Path
from typing import Any, Mapping, cast

import toml
import yaml


def load_properties_file(path: str | PathLike[str]) -> dict[str, str]:
    """Load table properties from a YAML, JSON or TOML file.

    Nested mappings are flattened into dotted keys, so ``{'delta':
    {'checkpointInterval': 10}}`` becomes ``{'delta.checkpointInterval':
    '10'}``. Scalar values are converted to the strings stored in table
    metadata.

    Raises
    ------
    FileNotFoundError
        When ``path`` does not exist.
    RuntimeError
        When the file type is unsupported or the top level is not a mapping.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f'Properties file not found: {path}')

    config = None
    text = path.read_text(encoding='utf-8')
    suffix = path.suffix.lower()
    match suffix:
        case '.yaml' | '.yml':
            config = yaml.safe_load(text)
        case '.json':
            config = json.loads(text)
        case '.toml':
            config = toml.loads(text)
        case _:
            raise RuntimeError(
                f'Unsupported properties file type: {suffix}, supported extensions: .yaml, .yml, .json, .toml'
            )

    if not isinstance(config, Mapping):
        raise RuntimeError('Properties file must contain a mapping at the top level')

    return _flatten(cast(Mapping[str, Any], config))


def save_properties_file(properties: Mapping[str, str], path: str | PathLike[str]) -> None:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    data = dict(properties)
    suffix = path.suffix.lower()
    match suffix:
        case '.yaml' | '.yml':
            with open(path, 'w', encoding='utf-8') as handle:
                yaml.safe_dump(data, handle, sort_keys=False)
        case '.json':
            with open(path, 'w', encoding='utf-8') as handle:
                json.dump(data, handle, indent=4, ensure_ascii=False)
        case '.toml':
            # toml quotes dotted keys, so they load back flat
            with open(path, 'w', encoding='utf-8') as handle:
                toml.dump(data, handle)
        case _:
            raise RuntimeError(
                f'Unsupported properties file type: {suffix}, supported extensions: .yaml, .yml, .json, .toml'
            )


def _flatten(config: Mapping[str, Any], prefix: str = '') -> dict[str, str]:
    flat: dict[str, str] = {}
    for key, value in config.items():
        full_key = f'{prefix}{key}'
        if isinstance(value, Mapping):
            flat.update(_flatten(cast(Mapping[str, Any], value), prefix=f'{full_key}.'))
        else:
            flat[full_key] = _to_property_string(value)
    return flat


def _to_property_string(value: Any) -> str:
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if value is None:
        raise RuntimeError('Table property values cannot be null')
    return str(value)
