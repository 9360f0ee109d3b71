"""Preset resolution and application.

A preset is either a callable taking the command, or the name of a module
exposing ``load(command)``. Named presets are looked up as
``<presets_dir>/<name>.py`` first, then in the built-in
``ffmpeg_fluent.presets`` package.
"""

import importlib
import importlib.util
import re
from pathlib import Path
from types import ModuleType
from typing import Callable, Optional

from ffmpeg_fluent.errors import PresetLoadError

BUILTIN_PRESETS_PACKAGE = "ffmpeg_fluent.presets"

PRESET_NAME_RE = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


def _import_preset_module(name: str, presets_dir: Optional[str]) -> ModuleType:
    if not PRESET_NAME_RE.match(name):
        raise ValueError(f"Invalid preset name '{name}'")

    if presets_dir:
        path = Path(presets_dir) / f"{name}.py"
        if path.is_file():
            spec = importlib.util.spec_from_file_location(f"{BUILTIN_PRESETS_PACKAGE}._custom_{name}", path)
            module = importlib.util.module_from_spec(spec)
            spec.loader.exec_module(module)
            return module

    return importlib.import_module(f"{BUILTIN_PRESETS_PACKAGE}.{name}")


def resolve_preset(name: str, presets_dir: Optional[str] = None) -> Callable:
    """Return the ``load`` function of the named preset.

    Raises:
        PresetLoadError: the module cannot be found or imported, or has no
            ``load`` function.
    """
    try:
        module = _import_preset_module(name, presets_dir)
    except Exception as exc:
        raise PresetLoadError(name, exc) from exc

    load = getattr(module, "load", None)
    if not callable(load):
        exc = AttributeError(f"preset {name} has no load() function")
        raise PresetLoadError(name, exc) from exc
    return load


class PresetMixin:
    """Preset method of FfmpegCommand."""

    presets_dir: Optional[str]

    def preset(self, preset):
        """Apply a preset function or a named preset module to this command."""
        if callable(preset):
            preset(self)
            return self

        if not isinstance(preset, str):
            exc = TypeError(f"preset must be a name or a callable, got {type(preset).__name__}")
            raise PresetLoadError(repr(preset), exc) from exc

        load = resolve_preset(preset, self.presets_dir)
        self.logger.debug("Applying preset %s", preset)
        try:
            load(self)
        except Exception as exc:
            raise PresetLoadError(preset, exc) from exc
        return self
