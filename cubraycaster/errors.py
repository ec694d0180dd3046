"""Exceptions raised while loading a scene or starting the game."""

from __future__ import annotations


class CubError(Exception):
    """Base class for every error reported by the game.

    ``message`` is the text shown to the user, ``exit_code`` the process
    status the command ends with, and ``with_header`` tells whether the
    report starts with an ``Error`` line.
    """

    message = "Unknown error"
    exit_code = 1
    with_header = True

    def __init__(self, message: str | None = None) -> None:
        if message is not None:
            self.message = message
        super().__init__(self.message)

    def report(self) -> str:
        """Return the text printed when this error ends the program."""
        if self.with_header:
            return f"\nError\n$ {self.message}\n\n"
        return f"\n$ {self.message}\n\n"


class MapFormatError(CubError):
    """The scene file or its map is malformed."""

    message = "Invalid MAP format"


class ColorError(CubError):
    """A floor or ceiling colour line is invalid."""

    message = "Incorrect MAP colors"


class PathError(CubError):
    """A texture path line is invalid."""

    message = "Incorrect path"


class PlayerError(CubError):
    """The map does not hold exactly one player start."""

    message = "Invalid PLAYER numbers"
    exit_code = 0


class FileError(CubError):
    """The scene file could not be read or is empty."""

    message = "Invalid file"
    with_header = False


class ArgumentError(CubError):
    """The command line is wrong."""

    message = "Invalid arguments"
    with_header = False


class ResolutionError(CubError):
    """The map is too large to fit the window."""

    message = "Resolution is too big"

    def report(self) -> str:
        return f"Error\n{self.message}\n"


class TextureNotFoundError(CubError):
    """A wall texture could not be loaded."""

    message = "File not found"

    def report(self) -> str:
        return f"Error\n{self.message}\n"