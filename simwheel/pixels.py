"""Pixel control that records the last request instead of driving LEDs."""

from __future__ import annotations

from .definitions import PixelGroup


class PixelRecorder:
    """Keeps the last pixel set and whether pixels were shown."""

    def __init__(self, pixel_count: int = 16) -> None:
        self.pixel_count = pixel_count
        self.last_color = 0
        self.last_group = PixelGroup.GRP_TELEMETRY
        self.last_index = 0
        self.shown = False
        self.ready = False
        self.last_shift: tuple[PixelGroup, int] | None = None

    def get_ready(self) -> None:
        """Mark pixel control as ready for use."""
        self.ready = True

    def set(self, group, pixel_index: int, red: int, green: int, blue: int) -> None:
        """Record a pixel color as packed RGB."""
        self.last_group = PixelGroup(group)
        self.last_color = (blue & 0xFF) | ((green & 0xFF) << 8) | ((red & 0xFF) << 16)
        self.last_index = pixel_index

    def set_all(self, group, red: int, green: int, blue: int) -> None:
        """Record a color for a whole group as pixel zero."""
        self.set(group, 0, red, green, blue)

    def shift_to_next(self, group) -> None:
        """Record a forward shift request for a group."""
        self.last_shift = (PixelGroup(group), 1)

    def shift_to_previous(self, group) -> None:
        """Record a backward shift request for a group."""
        self.last_shift = (PixelGroup(group), -1)

    def show(self) -> None:
        self.shown = True

    def reset(self) -> None:
        """Forget everything recorded."""
        self.last_color = 0
        self.last_group = PixelGroup.GRP_TELEMETRY
        self.last_index = 0
        self.shown = False

    def get_count(self, group) -> int:
        """Number of pixels in any group."""
        return self.pixel_count