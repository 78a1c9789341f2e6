import argparse
import json
import logging
import sys
from enum import Enum
from pathlib import Path
from typing import Any, Sequence

import yaml

from tableconf.config import load_properties_file
from tableconf.container import default_container
from tableconf.errors import PropertiesFileError, TableConfigError
from tableconf.properties import ALL_PROPERTIES

_logger = logging.getLogger(__name__)


def default_argparser(description: str = 'Validate and inspect Delta table properties') -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog='tableconf', description=description)
    parser.add_argument('-v', '--verbose', action='store_true', help='Enable debug logging.')

    subparsers = parser.add_subparsers(dest='command', required=True)

    validate = subparsers.add_parser(
        'validate',
        allow_abbrev=False,
        help='Validate table properties and print the normalized result.',
        description='Extra "--key value" or "--key=value" arguments override properties from the file.',
    )
    _add_config_argument(validate)

    show = subparsers.add_parser('show', help='Print the effective value of every table property.')
    _add_config_argument(show)

    subparsers.add_parser('list', help='List the known table properties.')

    return parser


def _add_config_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        '-c',
        '--config',
        type=Path,
        default=None,
        help='Optional, path to a properties file (supported extensions: *.json, *.yaml/yml, *.toml)',
    )


def cli_args_to_properties(args: Sequence[str]) -> dict[str, str]:
    """Parse ``--key value``, ``--key=value`` and bare ``--flag`` arguments.

    Values are kept as strings, as they are stored in table metadata. A bare
    flag becomes ``'true'``.
    """
    parsed: dict[str, str] = {}

    i = 0
    while i < len(args):
        token = args[i]
        if not token.startswith('--'):
            i += 1
            continue

        key_val = token[2:]
        if '=' in key_val:
            key, val_str = key_val.split('=', 1)
        else:
            # Look ahead for a separate value token.
            if i + 1 < len(args) and not args[i + 1].startswith('--'):
                val_str = args[i + 1]
                i += 1
            else:
                val_str = 'true'
            key = key_val

        parsed[key] = _strip_quotes(val_str)
        i += 1

    return parsed


def _strip_quotes(val: str) -> str:
    if len(val) >= 2 and ((val[0] == val[-1] == "'") or (val[0] == val[-1] == '"')):
        return val[1:-1]
    return val


def _to_json(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    return value


def _read_properties(config_file: Path | None) -> dict[str, str]:
    if config_file is None:
        return {}
    _logger.debug('Loading table properties from %s', config_file)
    try:
        return load_properties_file(config_file)
    except (OSError, RuntimeError, ValueError, yaml.YAMLError) as ex:
        raise PropertiesFileError(str(config_file), str(ex)) from ex


def _validate(config_file: Path | None, overrides: dict[str, str]) -> int:
    properties = {**_read_properties(config_file), **overrides}
    validated = default_container().validate_properties(properties)
    print(json.dumps(validated, indent=4))
    return 0


def _show(config_file: Path | None) -> int:
    configuration = _read_properties(config_file)
    values = {prop.get_key(): _to_json(prop.read_value(configuration)) for prop in ALL_PROPERTIES}
    print(json.dumps(values, indent=4))
    return 0


def _list() -> int:
    for prop in ALL_PROPERTIES:
        editable = 'editable' if prop.editable else 'read-only'
        default = prop.default_value if prop.default_value is not None else '<none>'
        print(f'{prop.get_key()} (default: {default}, {editable})')
        if prop.help_message:
            print(f'    {prop.help_message}')
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    parser = default_argparser()
    namespace, rest_args = parser.parse_known_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if namespace.verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s',
    )

    if rest_args and namespace.command != 'validate':
        parser.error(f'unrecognized arguments: {" ".join(rest_args)}')

    try:
        match namespace.command:
            case 'validate':
                return _validate(namespace.config, cli_args_to_properties(rest_args))
            case 'show':
                return _show(namespace.config)
            case _:
                return _list()
    except TableConfigError as ex:
        print(f'error: {ex}', file=sys.stderr)
        return 1
