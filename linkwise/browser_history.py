"""Browser history with back and forward navigation."""

from __future__ import annotations


class BrowserHistory:
    """Track visited pages and move back and forward through them."""

    def __init__(self, homepage: str) -> None:
        self._current = homepage
        self._back: list[str] = []
        self._forward: list[str] = []

    @property
    def current(self) -> str:
        """The page currently shown."""
        return self._current

    def visit(self, url: str) -> None:
        """Open ``url`` from the current page and drop the forward history."""
        self._back.append(self._current)
        self._current = url
        self._forward.clear()

    def back(self, steps: int) -> str:
        """Go back up to ``steps`` pages and return the page reached."""
        while steps > 0 and self._back:
            self._forward.append(self._current)
            self._current = self._back.pop()
            steps -= 1
        return self._current

    def forward(self, steps: int) -> str:
        """Go forward up to ``steps`` pages and return the page reached."""
        while steps > 0 and self._forward:
            self._back.append(self._current)
            self._current = self._forward.pop()
            steps -= 1
        return self._current