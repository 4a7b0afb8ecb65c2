# This file is a part of generes and is subject to the terms of the MIT license.
# SPDX-License-Identifier: MIT
"""
Loads YAML manifests listing resources and option defaults.
"""

import logging
from pathlib import Path
from typing import Any, List, Mapping, Tuple

import yaml
from misk import read_all_text_from_file

from .errors import ConfigError
from .model import ResourceEntry, parse_resource


log = logging.getLogger(__name__)

OPTION_KEYS = ('namespace', 'name', 'output', 'guards')
KNOWN_KEYS = OPTION_KEYS + ('resources',)


def parse_resource_item(item: Any) -> ResourceEntry:
    # Support shorthand item: "path:alias"
    if isinstance(item, str):
        return parse_resource(item)
    if isinstance(item, dict):
        path = item.get('file')
        alias = item.get('alias')
        if not isinstance(path, str) or not isinstance(alias, str) or not path or not alias:
            raise ConfigError(f'Resource {item!r} needs non-empty "file" and "alias" strings')
        return ResourceEntry(path, alias)
    raise ConfigError(f'Resource {item!r} is neither a "file:alias" string nor a mapping')


def parse_manifest(doc: Mapping[str, Any]) -> Tuple[Mapping[str, str], List[ResourceEntry]]:
    if doc is None:
        return {}, []
    if not isinstance(doc, dict):
        raise ConfigError('Manifest must be a mapping')

    unknown = sorted(str(k) for k in doc if k not in KNOWN_KEYS)
    if unknown:
        raise ConfigError(f"Unknown manifest keys: {', '.join(unknown)}")

    options = {}
    for key in OPTION_KEYS:
        value = doc.get(key)
        if value is None:
            continue
        if not isinstance(value, str):
            raise ConfigError(f'Manifest key "{key}" must be a string')
        options[key] = value

    items = doc.get('resources') or []
    if not isinstance(items, list):
        raise ConfigError('Manifest key "resources" must be a list')
    return options, [parse_resource_item(i) for i in items]


def load_manifest(path) -> Tuple[Mapping[str, str], List[ResourceEntry]]:
    path = Path(path)
    if not path.is_file():
        raise ConfigError(f"Manifest '{path}' does not exist or is not a file")
    try:
        text = read_all_text_from_file(path)
    except (OSError, UnicodeDecodeError) as err:
        raise ConfigError(f"Can't read manifest '{path}': {err}") from err
    text = text.replace('\t', '  ')  ## PyYAML doesn't like tabs
    try:
        doc = yaml.safe_load(text)
    except yaml.YAMLError as err:
        raise ConfigError(f'{path}: {err}') from err
    options, entries = parse_manifest(doc)
    log.debug('Manifest %s: %d options, %d resources', path, len(options), len(entries))
    return options, entries
