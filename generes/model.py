# This file is a part of generes and is subject to the terms of the MIT license.
# SPDX-License-Identifier: MIT

import enum
from dataclasses import dataclass, field
from typing import List, Optional

from .errors import ConfigError, ResourceOpenError


DEFAULT_NAMESPACE = 'resources'
DEFAULT_NAME = 'resources'
DEFAULT_OUTPUT = 'resources.hpp'


class GuardStyle(enum.Enum):
    DEFINE = 'define'
    PRAGMA = 'pragma'


@dataclass(frozen=True)
class ResourceEntry:
    source_path: str
    alias: str


@dataclass(frozen=True)
class GenerationConfig:
    namespace: str = DEFAULT_NAMESPACE
    name: str = DEFAULT_NAME
    output: str = DEFAULT_OUTPUT
    guards: GuardStyle = GuardStyle.DEFINE


@dataclass
class EntryResult:
    entry: ResourceEntry
    size: int = 0
    error: Optional[ResourceOpenError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class EmitReport:
    output: str
    results: List[EntryResult] = field(default_factory=list)

    @property
    def written(self) -> List[EntryResult]:
        return [r for r in self.results if r.ok]

    @property
    def failed(self) -> List[EntryResult]:
        return [r for r in self.results if not r.ok]


def parse_resource(token: str) -> ResourceEntry:
    """
    Parses a ``path:alias`` token, splitting at the first colon.
    """
    path, sep, alias = token.partition(':')
    if not sep:
        raise ConfigError(f"'{token}' is not of the form file:alias")
    if not path:
        raise ConfigError(f"'{token}' has an empty file path")
    if not alias:
        raise ConfigError(f"'{token}' has an empty alias")
    return ResourceEntry(path, alias)
