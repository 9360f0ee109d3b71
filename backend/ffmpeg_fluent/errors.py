"""Exceptions raised by the fluent command builder.

Every error is raised at the offending call, before any state is touched,
so a command stays usable after the caller handles the exception.
"""


class FfmpegCommandError(Exception):
    """Base class for all command builder errors."""


# ---------------------------------------------------------------------------
# Input / output registration
# ---------------------------------------------------------------------------

class InvalidInputError(FfmpegCommandError, ValueError):
    """Raised when an input source is neither a path nor a readable stream."""


class InvalidOutputError(FfmpegCommandError, ValueError):
    """Raised when an output target is missing or not a writable stream."""


class DuplicateStreamInputError(FfmpegCommandError):
    """Raised when a second stream input is added to a command."""


class DuplicateStreamOutputError(FfmpegCommandError):
    """Raised when a second stream output is added to a command."""


class NoCurrentInputError(FfmpegCommandError):
    """Raised when an input option is set before any input was added."""


# ---------------------------------------------------------------------------
# Filters
# ---------------------------------------------------------------------------

class InvalidFilterError(FfmpegCommandError, TypeError):
    """Raised when a filter argument is not a string or filter descriptor."""


# ---------------------------------------------------------------------------
# Presets
# ---------------------------------------------------------------------------

class PresetLoadError(FfmpegCommandError):
    """Raised when a preset cannot be resolved, imported or applied."""

    def __init__(self, preset: str, cause: BaseException):
        self.preset = preset
        self.cause = cause
        super().__init__(f"preset {preset} could not be loaded: {cause}")


# ---------------------------------------------------------------------------
# Argument generation
# ---------------------------------------------------------------------------

class IncompleteCommandError(FfmpegCommandError):
    """Raised when arguments are requested for a command that fails validation."""

    def __init__(self, result):
        self.result = result
        super().__init__("; ".join(result.errors) or "Command is incomplete")
