"""Shared types and helpers used across ffmpeg_fluent modules."""

import os
import re
from dataclasses import dataclass, field
from typing import List

# A leading "scheme:" of two or more letters (single letters are drive names)
PROTOCOL_RE = re.compile(r"^([a-z]{2,}):", re.IGNORECASE)


@dataclass
class ValidationResult:
    """Result of validating a command or one of its parts."""

    valid: bool = True
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    def add_error(self, msg: str) -> None:
        self.errors.append(msg)
        self.valid = False

    def add_warning(self, msg: str) -> None:
        self.warnings.append(msg)

    def merge(self, other: "ValidationResult") -> None:
        """Merge another ValidationResult into this one."""
        if not other.valid:
            self.valid = False
        self.errors.extend(other.errors)
        self.warnings.extend(other.warnings)


def is_path_like(value) -> bool:
    return isinstance(value, (str, os.PathLike))


def is_file_uri(path: str) -> bool:
    """Return True when ``path`` has no protocol prefix or uses ``file:``."""
    match = PROTOCOL_RE.match(path)
    return match is None or match.group(1).lower() == "file"


def has_capability(stream, name: str) -> bool:
    """Check a stream's ``readable``/``writable`` capability.

    Accepts both boolean attributes and zero-argument methods such as
    ``io.IOBase.readable()``.
    """
    capability = getattr(stream, name, None)
    if capability is None:
        return False
    if callable(capability):
        capability = capability()
    return bool(capability)


def normalize_bitrate(bitrate) -> str:
    """Render a bitrate in kbps with exactly one trailing ``k``."""
    if isinstance(bitrate, float) and bitrate.is_integer():
        bitrate = int(bitrate)
    value = str(bitrate)
    return value if value.endswith("k") else f"{value}k"


def split_custom_options(options: tuple) -> List[str]:
    """Expand custom option arguments into tokens.

    A single argument (string or list) is treated as a list of options and
    each ``"-flag value"`` entry is split at its one space. Several
    positional arguments are taken verbatim.
    """
    if len(options) == 1:
        entries = options[0]
        if not isinstance(entries, (list, tuple)):
            entries = [entries]
        tokens: List[str] = []
        for entry in entries:
            parts = str(entry).split(" ")
            if len(parts) == 2:
                tokens.extend(parts)
            else:
                tokens.append(str(entry))
        return tokens
    return [str(option) for option in options]
