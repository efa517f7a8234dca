"""Base user interface for notifications and telemetry display."""

from __future__ import annotations

from dataclasses import dataclass

from .telemetry import TelemetryData


@dataclass
class FrameTimer:
    """A simple accumulating timer for use in ``serve_single_frame``."""

    value: int = 0

    def advance(self, elapsed_ms: int, time_limit_ms: int) -> int:
        """Add elapsed time and return how many times the limit expired."""
        if time_limit_ms <= 0:
            raise ValueError("time limit must be positive")
        self.value += elapsed_ms
        expired, self.value = divmod(self.value, time_limit_ms)
        return expired


class AbstractUserInterface:
    """Interface for notifications and telemetry display.

    Subclasses override the hooks they need. The default hooks keep track of
    the last known state so that subclasses can consult it.
    Instances cannot be copied.
    """

    def __init__(self) -> None:
        self.requires_powertrain_telemetry = False
        self.requires_ecu_telemetry = False
        self.requires_race_control_telemetry = False
        self.requires_gauge_telemetry = False
        self.started = False
        self.telemetry_data: TelemetryData | None = None
        self.elapsed_ms = 0
        self.bite_point: int | None = None
        self.connected = False
        self.discovering = False
        self.low_battery_count = 0
        self.save_count = 0
        self.is_shut_down = False

    def __copy__(self):
        raise TypeError(f"{type(self).__name__} is not copyable")

    def __deepcopy__(self, memo):
        raise TypeError(f"{type(self).__name__} is not copyable")

    def get_max_fps(self) -> int:
        """Maximum frames per second supported; zero disables telemetry."""
        return 0

    def get_stack_size(self) -> int:
        """Stack size required by the display daemon; zero means default."""
        return 0

    def on_start(self) -> None:
        """Called once after initialization."""
        self.started = True

    def on_telemetry_data(self, telemetry_data: TelemetryData | None) -> None:
        """New telemetry data, or ``None`` when none arrived recently."""
        self.telemetry_data = telemetry_data

    def serve_single_frame(self, elapsed_ms: int) -> None:
        """Draw a single frame."""
        self.elapsed_ms += elapsed_ms

    def on_bite_point(self, bite_point: int) -> None:
        """The bite point changed."""
        self.bite_point = bite_point

    def on_connected(self) -> None:
        """The device is connected."""
        self.connected = True
        self.discovering = False

    def on_ble_discovering(self) -> None:
        """The device is in discovery mode."""
        self.connected = False
        self.discovering = True

    def on_low_battery(self) -> None:
        """Battery is low; repeated while the condition persists."""
        self.low_battery_count += 1

    def on_save_settings(self) -> None:
        """User settings were saved to persistent storage."""
        self.save_count += 1

    def shutdown(self) -> None:
        """Cut power to the UI hardware."""
        self.is_shut_down = True