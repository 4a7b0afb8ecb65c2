# This file is a part of generes and is subject to the terms of the MIT license.
# SPDX-License-Identifier: MIT

import logging
from pathlib import Path

from .errors import DirectoryCreationError
from .model import DEFAULT_OUTPUT


log = logging.getLogger(__name__)

HEADER_SUFFIXES = ('.h', '.hpp')


def normalize_output(output: str) -> str:
    """
    Returns the output path with a header suffix, appending ``.hpp`` when it
    has neither ``.h`` nor ``.hpp``. An empty path selects the default.
    """
    if not output:
        output = DEFAULT_OUTPUT
    if not output.endswith(HEADER_SUFFIXES):
        output += '.hpp'
    return output


def ensure_parent_dir(output: str) -> None:
    parent = Path(output).parent
    if str(parent) in ('', '.') or parent.is_dir():
        return
    log.debug('Creating directory %s', parent)
    try:
        parent.mkdir(parents=True, exist_ok=True)
    except OSError as err:
        raise DirectoryCreationError(str(parent), output, err) from err
