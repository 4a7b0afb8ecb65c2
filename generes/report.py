# This file is a part of generes and is subject to the terms of the MIT license.
# SPDX-License-Identifier: MIT

import logging
import sys


log = logging.getLogger(__name__)


class Reporter:
    """
    Prints the [ OK ] / [FAIL] status lines of a run.
    """

    def __init__(self, out=None, err=None):
        self.out = sys.stdout if out is None else out
        self.err = sys.stderr if err is None else err

    def resource_failed(self, result):
        print(f"[FAIL] Can't open file '{result.entry.source_path}'", file=self.out, flush=True)
        log.debug('%s: %s', result.entry.source_path, result.error.reason)

    def resource_written(self, result):
        log.debug("Embedded '%s' as \"%s\" (%d bytes)",
                  result.entry.source_path, result.entry.alias, result.size)

    def generated(self, report):
        print(f"[ OK ] File '{report.output}' generated", file=self.out, flush=True)

    def fatal(self, err):
        print(f'[FAIL] {err}', file=self.err, flush=True)
