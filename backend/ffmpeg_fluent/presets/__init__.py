"""Built-in presets. Each module exposes ``load(command)``."""
