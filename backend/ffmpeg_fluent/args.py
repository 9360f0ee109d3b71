"""Ordered token accumulator shared by every option category."""

from typing import Iterator, List, Optional


class Args:
    """Append-only list of command-line tokens with a reset.

    Tokens are kept in call order and never deduplicated; conflicting
    options (two codecs, say) are left for ffmpeg to resolve.
    """

    def __init__(self, *tokens):
        self._tokens: List[str] = []
        self.append(*tokens)

    def append(self, *tokens) -> "Args":
        """Append tokens, flattening list and tuple arguments one level."""
        for token in tokens:
            if isinstance(token, (list, tuple)):
                self._tokens.extend(str(t) for t in token)
            else:
                self._tokens.append(str(token))
        return self

    def clear(self) -> "Args":
        self._tokens.clear()
        return self

    def to_list(self) -> List[str]:
        """Return a copy of the accumulated tokens."""
        return list(self._tokens)

    def find(self, flag: str, count: int = 1) -> Optional[List[str]]:
        """Return the ``count`` tokens following the first ``flag``, or None."""
        try:
            index = self._tokens.index(flag)
        except ValueError:
            return None
        return self._tokens[index + 1:index + 1 + count]

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._tokens))

    def __len__(self) -> int:
        return len(self._tokens)

    def __bool__(self) -> bool:
        return bool(self._tokens)

    def __eq__(self, other) -> bool:
        if isinstance(other, Args):
            return self._tokens == other._tokens
        if isinstance(other, list):
            return self._tokens == other
        return NotImplemented

    def __repr__(self) -> str:
        return f"Args({self._tokens!r})"
