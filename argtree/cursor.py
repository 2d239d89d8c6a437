# Argtree CLI Resolver — (c) 2025 rtj.dev LLC — MIT Licensed
"""Forward-only cursor over the tokens handed to a single resolution."""
from __future__ import annotations

from typing import Iterable


class TokenCursor:
    """
    Walks a token list front to back. Shared by a node and every subcommand it
    dispatches to, so a nested resolution continues exactly where its parent
    stopped.
    """

    def __init__(self, tokens: Iterable[str] | None = None) -> None:
        self._tokens: tuple[str, ...] = tuple(tokens or ())
        self._position: int = 0

    @property
    def position(self) -> int:
        return self._position

    def exhausted(self) -> bool:
        return self._position >= len(self._tokens)

    def peek(self) -> str:
        if self.exhausted():
            raise IndexError("No tokens remain")
        return self._tokens[self._position]

    def advance(self) -> str:
        """Consume and return the current token."""
        token = self.peek()
        self._position += 1
        return token

    def remaining(self) -> tuple[str, ...]:
        return self._tokens[self._position :]

    def __len__(self) -> int:
        return len(self._tokens) - self._position

    def __repr__(self) -> str:
        return f"TokenCursor(position={self._position}, remaining={list(self.remaining())!r})"
