"""Read-only snapshots of a built command, handed to argument generation."""

from typing import Any, Dict, Tuple

from pydantic import BaseModel, ConfigDict


class InputSnapshot(BaseModel):
    """Frozen copy of one input."""

    model_config = ConfigDict(frozen=True)

    source: Any
    is_file: bool = False
    is_stream: bool = False
    options: Tuple[str, ...] = ()


class OutputSnapshot(BaseModel):
    """Frozen copy of one output and its six token sequences."""

    model_config = ConfigDict(frozen=True)

    target: Any = None
    is_file: bool = False
    is_stream: bool = False
    pipe_options: Dict[str, Any] = {}
    flags: Dict[str, bool] = {}
    options: Tuple[str, ...] = ()
    audio: Tuple[str, ...] = ()
    audio_filters: Tuple[str, ...] = ()
    video: Tuple[str, ...] = ()
    video_filters: Tuple[str, ...] = ()
    size_filters: Tuple[str, ...] = ()


class CommandSnapshot(BaseModel):
    """Frozen copy of a whole command: ordered inputs and outputs."""

    model_config = ConfigDict(frozen=True)

    inputs: Tuple[InputSnapshot, ...] = ()
    outputs: Tuple[OutputSnapshot, ...] = ()
