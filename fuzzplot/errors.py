"""Errors raised while loading data or rendering a chart."""


class FuzzplotError(RuntimeError):
    """ Base class. `exit_code` is what the command line tool exits with. """
    exit_code = 3


class DataFileNotFound(FuzzplotError):
    exit_code = 1

    def __init__(self, path):
        super().__init__(f"{path}: No such file or directory")
        self.path = path


class MalformedRow(FuzzplotError):
    exit_code = 2

    def __init__(self, path, lineno, line, reason="expected at least two numeric columns"):
        super().__init__(f"{path}:{lineno}: {reason}: {line.strip()!r}")
        self.path = path
        self.lineno = lineno
        self.line = line


class ConfigurationError(FuzzplotError):
    exit_code = 3


class InvalidScaleForData(ConfigurationError):
    def __init__(self, path, lineno, axis, value):
        super().__init__(
            f"{path}:{lineno}: {axis} value {value:g} is not positive, "
            f"cannot use a logarithmic {axis} axis")
        self.path = path
        self.lineno = lineno
        self.axis = axis
        self.value = value
