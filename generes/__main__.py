# This file is a part of generes and is subject to the terms of the MIT license.
# SPDX-License-Identifier: MIT

from .cli import entry

if __name__ == '__main__':
    entry()
