"""Text editor with a cursor that can type, delete and move."""

from __future__ import annotations

_VIEW = 10


class TextEditor:
    """Editable text with a cursor; moves report up to ten characters left of it."""

    def __init__(self) -> None:
        self._left: list[str] = []
        # Characters right of the cursor, nearest one last.
        self._right: list[str] = []

    @property
    def text(self) -> str:
        """The whole text."""
        return "".join(self._left) + "".join(reversed(self._right))

    def _view(self) -> str:
        return "".join(self._left[-_VIEW:])

    def add_text(self, text: str) -> None:
        """Insert ``text`` at the cursor, leaving the cursor after it."""
        self._left.extend(text)

    def delete_text(self, k: int) -> int:
        """Delete up to ``k`` characters left of the cursor; return how many went."""
        count = max(0, min(k, len(self._left)))
        del self._left[len(self._left) - count:]
        return count

    def cursor_left(self, k: int) -> str:
        """Move the cursor up to ``k`` places left."""
        for _ in range(max(0, min(k, len(self._left)))):
            self._right.append(self._left.pop())
        return self._view()

    def cursor_right(self, k: int) -> str:
        """Move the cursor up to ``k`` places right."""
        for _ in range(max(0, min(k, len(self._right)))):
            self._left.append(self._right.pop())
        return self._view()