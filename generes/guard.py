# This file is a part of generes and is subject to the terms of the MIT license.
# SPDX-License-Identifier: MIT
"""
Include guard derivation.

The guard token is built from the namespace and the base name of the output
file, e.g. ``out/res.hpp`` in namespace ``resources`` gives
``_RESOURCES_RES_HPP_``.
"""

import re
from pathlib import PurePath

from .model import DEFAULT_NAMESPACE, DEFAULT_OUTPUT


_re_control = re.compile(r'[\x00-\x1f\x7f]')
_re_non_ident = re.compile(r'[^A-Za-z0-9_]')


def clean_segment(text: str) -> str:
    text = _re_control.sub('', text)
    text = _re_non_ident.sub('_', text)
    return text.upper()


def derive_guard(output: str, namespace: str) -> str:
    filename = clean_segment(PurePath(output).name)
    if not filename:
        filename = clean_segment(DEFAULT_OUTPUT)
    namespace = clean_segment(namespace)
    if not namespace:
        namespace = clean_segment(DEFAULT_NAMESPACE)
    return f'_{namespace}_{filename}_'
