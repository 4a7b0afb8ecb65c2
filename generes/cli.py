# This file is a part of generes and is subject to the terms of the MIT license.
# SPDX-License-Identifier: MIT

import logging
import sys

from . import utils
from .args import build_config, parse_args
from .emitter import emit
from .errors import DirectoryCreationError, OutputWriteError
from .guard import derive_guard
from .paths import ensure_parent_dir
from .report import Reporter


log = logging.getLogger(__name__)


def main(argv=None, reporter=None):
    logging.basicConfig(level=logging.INFO)
    args = parse_args(argv)
    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)
    config, entries = build_config(args)
    reporter = Reporter() if reporter is None else reporter

    guard = derive_guard(config.output, config.namespace)
    log.debug('Output %s, guard %s, %d resources', config.output, guard, len(entries))

    try:
        ensure_parent_dir(config.output)
        report = emit(config, entries, guard, reporter=reporter)
    except (DirectoryCreationError, OutputWriteError) as err:
        reporter.fatal(err)
        return 1

    reporter.generated(report)
    return 0


def entry():
    utils.run(main, verbose=utils.wants_verbose(sys.argv[1:]))
