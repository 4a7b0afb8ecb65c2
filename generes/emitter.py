# This file is a part of generes and is subject to the terms of the MIT license.
# SPDX-License-Identifier: MIT
"""
Writes the C++ header holding the resource table.
"""

import logging
import re
from typing import Iterable, Union

from .errors import OutputWriteError, ResourceOpenError
from .model import EmitReport, EntryResult, GenerationConfig, GuardStyle, ResourceEntry


log = logging.getLogger(__name__)

BANNER = (
    '// this file is auto-generated by the generes program',
    '// any changes made to it will be lost when it is regenerated',
)

INCLUDES = ('cstdint', 'string', 'vector', 'unordered_map')

_re_control = re.compile(r'[\x00-\x1f\x7f]')


def format_bytes(data: Union[bytes, bytearray]) -> str:
    """
    Renders data as unsigned decimal literals, each followed by a comma.
    """
    return ''.join(f'{b},' for b in data)


def escape_c_string(s: str) -> str:
    s = s.replace('\\', '\\\\')
    s = s.replace('"', '\\"')
    s = s.replace('\n', '\\n')
    s = s.replace('\r', '\\r')
    s = s.replace('\t', '\\t')
    # remaining control characters as three-digit octal escapes
    return _re_control.sub(lambda m: f'\\{ord(m.group(0)):03o}', s)


def render_entry(alias: str, data: Union[bytes, bytearray]) -> str:
    return f'    {{ "{escape_c_string(alias)}", {{ {format_bytes(data)} }} }},'


def read_resource(path: str) -> bytes:
    try:
        with open(path, 'rb') as f:
            return f.read()
    except OSError as err:
        raise ResourceOpenError(path, err) from err


def emit(config: GenerationConfig, entries: Iterable[ResourceEntry], guard: str,
         reporter=None) -> EmitReport:
    report = EmitReport(config.output)
    try:
        with open(config.output, 'w', encoding='utf-8', errors='surrogateescape',
                  newline='\n') as output:
            write = lambda txt='', end='\n': print(txt, file=output, end=end)

            for line in BANNER:
                write(line)
            write()
            if config.guards is GuardStyle.DEFINE:
                write(f'#ifndef {guard}')
                write(f'#define {guard}')
            else:
                write('#pragma once')
            write()
            for header in INCLUDES:
                write(f'#include <{header}>')
            write()
            write(f'namespace {config.namespace} {{')
            write(f'static std::unordered_map<std::string, std::vector<uint8_t> > const {config.name} =')
            write('{')

            for entry in entries:
                result = EntryResult(entry)
                try:
                    data = read_resource(entry.source_path)
                except ResourceOpenError as err:
                    result.error = err
                    report.results.append(result)
                    if reporter is not None:
                        reporter.resource_failed(result)
                    continue
                write(render_entry(entry.alias, data))
                result.size = len(data)
                report.results.append(result)
                if reporter is not None:
                    reporter.resource_written(result)

            write('};')
            write(f'}}  // namespace {config.namespace}')
            if config.guards is GuardStyle.DEFINE:
                write()
                write(f'#endif  // {guard}')
    except (OSError, UnicodeError) as err:
        raise OutputWriteError(config.output, err) from err

    log.debug('%d of %d resources written to %s',
              len(report.written), len(report.results), config.output)
    return report
