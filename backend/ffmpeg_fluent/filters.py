"""Filter normalization: descriptors and strings into canonical filter tokens."""

import re
from dataclasses import dataclass
from typing import List, Mapping, Sequence, Union

from ffmpeg_fluent.errors import InvalidFilterError

FilterOptions = Union[str, int, float, Sequence[str], Mapping[str, object], None]

# Characters that end an option value or a filter inside a filtergraph
RESERVED_RE = re.compile(r"[:=,]")


def escape_option(value) -> str:
    """Single-quote an option value that contains ``:``, ``=`` or ``,``."""
    text = str(value)
    if RESERVED_RE.search(text):
        return f"'{text}'"
    return text


@dataclass(frozen=True)
class FilterDescriptor:
    """A filter name with optional options, e.g. ``FilterDescriptor("volume", {"v": 2})``."""

    filter: str
    options: FilterOptions = None

    @classmethod
    def from_dict(cls, spec: Mapping) -> "FilterDescriptor":
        """Build a descriptor from a ``{"filter": ..., "options": ...}`` dict."""
        name = spec.get("filter")
        if not isinstance(name, str) or not name:
            raise InvalidFilterError(f"Filter spec {spec!r} has no 'filter' name")
        return cls(filter=name, options=spec.get("options"))

    def to_string(self) -> str:
        opts = self.options
        if opts is None:
            rendered = ""
        elif isinstance(opts, str):
            rendered = opts
        elif isinstance(opts, (int, float)) and not isinstance(opts, bool):
            rendered = str(opts)
        elif isinstance(opts, Mapping):
            rendered = ":".join(f"{key}={escape_option(value)}" for key, value in opts.items())
        elif isinstance(opts, (list, tuple)):
            rendered = ":".join(escape_option(value) for value in opts)
        else:
            raise InvalidFilterError(
                f"Options for filter '{self.filter}' must be a string, number, "
                f"sequence or mapping, got {type(opts).__name__}"
            )
        return f"{self.filter}={rendered}" if rendered else self.filter


FilterItem = Union[str, FilterDescriptor]


def _coerce_item(item) -> FilterItem:
    if isinstance(item, (str, FilterDescriptor)):
        return item
    if isinstance(item, Mapping):
        return FilterDescriptor.from_dict(item)
    raise InvalidFilterError(
        f"Filter must be a string or filter descriptor, got {type(item).__name__}"
    )


def flatten_filters(filters: Sequence) -> List[FilterItem]:
    """Flatten variadic filter arguments one level into filter items."""
    items: List[FilterItem] = []
    for arg in filters:
        if isinstance(arg, (list, tuple)):
            items.extend(_coerce_item(item) for item in arg)
        else:
            items.append(_coerce_item(arg))
    return items


def make_filter_strings(filters: Sequence) -> List[str]:
    """Convert filter arguments into canonical ``name[=options]`` tokens.

    Each argument is a filter string, a :class:`FilterDescriptor` (or a dict
    with ``filter``/``options`` keys), or a list/tuple of those. Every item
    stays a separate token; joining them into a chain is left to argument
    generation.
    """
    return [
        item if isinstance(item, str) else item.to_string()
        for item in flatten_filters(filters)
    ]
