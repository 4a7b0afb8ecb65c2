# This file is a part of generes and is subject to the terms of the MIT license.
# SPDX-License-Identifier: MIT
"""
Generates C++ headers embedding binary files as byte arrays.
"""

from .args import resolve
from .emitter import emit, format_bytes
from .guard import derive_guard
from .model import EmitReport, GenerationConfig, GuardStyle, ResourceEntry
from .paths import ensure_parent_dir, normalize_output

__version__ = '0.1.0'
