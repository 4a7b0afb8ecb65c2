# This file is a part of generes and is subject to the terms of the MIT license.
# SPDX-License-Identifier: MIT
"""
Exceptions raised while resolving arguments and generating a header.
"""


class GeneresError(Exception):
    pass


class ConfigError(GeneresError):
    pass


class DirectoryCreationError(GeneresError):
    def __init__(self, directory, output, reason=None):
        self.directory = directory
        self.output = output
        self.reason = reason
        super().__init__(f"Can't create directory '{directory}' for output file '{output}'")


class ResourceOpenError(GeneresError):
    def __init__(self, path, reason=None):
        self.path = path
        self.reason = reason
        super().__init__(f"Can't open file '{path}'")


class OutputWriteError(GeneresError):
    def __init__(self, output, reason=None):
        self.output = output
        self.reason = reason
        msg = f"Can't write output file '{output}'"
        if reason is not None:
            msg += f': {reason}'
        super().__init__(msg)
