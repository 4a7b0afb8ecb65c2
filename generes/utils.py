# This file is a part of generes and is subject to the terms of the MIT license.
# SPDX-License-Identifier: MIT

import sys

from misk import print_exception


def wants_verbose(argv):
    return any(a in ('-v', '--verbose') for a in argv)


def run(main_func, *args, verbose=False):
    """
    Calls main_func and exits with its return value, pretty-printing anything
    that escapes it.
    """
    try:
        result = main_func(*args)
    except Exception as err:
        print_exception(err, logger=sys.stderr, include_type=verbose, include_traceback=verbose, skip_frames=1)
        sys.exit(-1)
    sys.exit(0 if result is None else int(result))
