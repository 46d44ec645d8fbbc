"""Exception hierarchy for the Game of Life console simulator.

Every error is raised before the simulation loop starts; once the loop is
running nothing in the engine or renderer can fail.
"""

from __future__ import annotations


class GameOfLifeError(Exception):
    """Base class for all fatal start-up errors."""


class UsageError(GameOfLifeError):
    """Command line arguments did not match ``gol [-f <filename>]``."""


class SettingsError(GameOfLifeError):
    """The TOML settings file is malformed or holds invalid values."""


class ConfigError(GameOfLifeError):
    """The board configuration file could not be used."""


class ConfigFileNotFoundError(ConfigError):
    def __init__(self, path) -> None:
        self.path = path
        super().__init__(f'Configuration file "{path}" does not exist!')


class ConfigFileUnreadableError(ConfigError):
    def __init__(self, path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f'Configuration file "{path}" could not be read: {reason}')


class InvalidCharacterError(ConfigError):
    def __init__(self, char: str, row: int, column: int) -> None:
        self.char = char
        self.row = row
        self.column = column
        super().__init__(
            f'Invalid char "{char}" detected at row {row}, column {column}!'
        )


class InconsistentRowLengthError(ConfigError):
    def __init__(self, row: int, expected: int, actual: int) -> None:
        self.row = row
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Inconsistent column count detected in row {row} "
            f"(expected {expected}, got {actual})!"
        )


class AllocationFailure(GameOfLifeError):
    """Board storage could not be obtained."""


class BoardAllocationError(AllocationFailure):
    def __init__(self, height: int, width: int) -> None:
        self.height = height
        self.width = width
        super().__init__(f"Could not allocate a {height}×{width} board!")


class BoardTooLargeError(AllocationFailure):
    def __init__(self, height: int, width: int, limit: int) -> None:
        self.height = height
        self.width = width
        self.limit = limit
        super().__init__(
            f"Board of {height}×{width} exceeds the maximum dimension of {limit}!"
        )
