"""Public render surface handle."""

from __future__ import annotations

from rich.console import Console


class RenderSurface:
    """Terminal geometry plus the console output sink.

    Owned by the driver and lent to the active state for one call at a time.
    """

    def __init__(self, console: Console | None = None) -> None:
        self._console = console if console is not None else Console()

    @property
    def sink(self) -> Console:
        return self._console

    @property
    def width(self) -> int:
        return self._console.size.width

    @property
    def height(self) -> int:
        return self._console.size.height

    def resize(self, width: int, height: int) -> bool:
        """Set terminal geometry. Returns whether it changed."""
        if width <= 0 or height <= 0:
            raise ValueError("surface size must be > 0")
        if (self.width, self.height) == (width, height):
            return False
        self._console.size = (width, height)
        return True

    def clear(self) -> None:
        self._console.clear()


def create_render_surface(*, width: int | None = None, height: int | None = None) -> RenderSurface:
    """Create a surface over the process console, optionally pinning its size."""
    return RenderSurface(Console(width=width, height=height))
