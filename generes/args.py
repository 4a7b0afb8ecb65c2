# This file is a part of generes and is subject to the terms of the MIT license.
# SPDX-License-Identifier: MIT
"""
Command line parsing and resolution of the generation settings.

Resources are given as ``file:alias`` tokens and are split at the first
colon, so file paths containing ``:`` are not supported.
"""

import argparse
import logging
from typing import List, Optional, Sequence, Tuple

from .config import load_manifest
from .errors import ConfigError
from .model import (DEFAULT_NAME, DEFAULT_NAMESPACE, DEFAULT_OUTPUT, GenerationConfig,
                    GuardStyle, ResourceEntry, parse_resource)
from .paths import normalize_output


log = logging.getLogger(__name__)

VERSION = '%(prog)s v0.1.0'
GUARD_CHOICES = [s.value for s in GuardStyle]


def resource_arg(token: str) -> ResourceEntry:
    try:
        return parse_resource(token)
    except ConfigError as err:
        raise argparse.ArgumentTypeError(str(err))


def make_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog='generes',
        description='Tool to generate C++ files with binary resources',
        fromfile_prefix_chars='@',
        formatter_class=argparse.ArgumentDefaultsHelpFormatter)
    ap.add_argument('--version', action='version', version=VERSION)
    ap.add_argument('-v', '--verbose', action='store_true', help='enable verbose output')
    ap.add_argument('-c', '--config', metavar='file', help='YAML manifest with options and resources')
    ap.add_argument('resources', nargs='*', metavar='file:alias', type=resource_arg,
                    help='list of resources')
    ap.add_argument('--guards', choices=GUARD_CHOICES, default=GuardStyle.DEFINE.value,
                    help='include guards')
    ap.add_argument('--name', default=DEFAULT_NAME, help='name for resources')
    ap.add_argument('--namespace', default=DEFAULT_NAMESPACE, help='namespace for resources')
    ap.add_argument('-o', '--output', metavar='file', default=DEFAULT_OUTPUT,
                    help='output file name')
    return ap


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    ap = make_parser()

    # Manifest values become defaults, so they need to be known up front
    pre = argparse.ArgumentParser(add_help=False, fromfile_prefix_chars='@')
    pre.add_argument('-c', '--config')
    known, _ = pre.parse_known_args(argv)

    manifest_entries = []
    if known.config:
        try:
            options, manifest_entries = load_manifest(known.config)
        except ConfigError as err:
            ap.error(str(err))
        ap.set_defaults(**options)

    args = ap.parse_intermixed_args(argv)
    # argparse doesn't check defaults against choices
    if args.guards not in GUARD_CHOICES:
        ap.error(f"argument --guards: invalid choice: '{args.guards}' "
                 f"(choose from {', '.join(GUARD_CHOICES)})")
    args.resources = manifest_entries + list(args.resources or [])
    return args


def build_config(args: argparse.Namespace) -> Tuple[GenerationConfig, List[ResourceEntry]]:
    config = GenerationConfig(
        namespace=args.namespace or DEFAULT_NAMESPACE,
        name=args.name or DEFAULT_NAME,
        output=normalize_output(args.output),
        guards=GuardStyle(args.guards))

    seen = set()
    for entry in args.resources:
        if entry.alias in seen:
            log.warning('Duplicate alias "%s" (%s)', entry.alias, entry.source_path)
        seen.add(entry.alias)

    return config, list(args.resources)


def resolve(argv: Optional[Sequence[str]] = None) -> Tuple[GenerationConfig, List[ResourceEntry]]:
    return build_config(parse_args(argv))
