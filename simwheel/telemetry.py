"""Telemetry data received from the host."""

from __future__ import annotations

from dataclasses import dataclass, field, fields


@dataclass
class Powertrain:
    """Powertrain telemetry."""

    gear: str = " "
    rpm: int = 0
    rpm_percent: int = 0
    shift_light1: int = 0
    shift_light2: int = 0
    rev_limiter: bool = False
    engine_started: bool = False
    speed: int = 0


@dataclass
class Ecu:
    """ECU telemetry."""

    abs_engaged: bool = False
    tc_engaged: bool = False
    drs_engaged: bool = False
    pit_limiter: bool = False
    low_fuel_alert: bool = False
    abs_level: int = 0
    tc_level: int = 0
    tc_cut: int = 0
    brake_bias: int = 0


@dataclass
class RaceControl:
    """Race control telemetry."""

    black_flag: bool = False
    blue_flag: bool = False
    checkered_flag: bool = False
    green_flag: bool = False
    orange_flag: bool = False
    white_flag: bool = False
    yellow_flag: bool = False
    remaining_laps: int = 0
    remaining_minutes: int = 0


@dataclass
class Gauges:
    """Gauges telemetry."""

    relative_turbo_pressure: int = 0
    absolute_turbo_pressure: float = 0.0
    water_temperature: int = 0
    oil_pressure: float = 0.0
    oil_temperature: int = 0
    relative_remaining_fuel: int = 0
    absolute_remaining_fuel: int = 0


@dataclass
class TelemetryData:
    """A full telemetry frame."""

    frame_id: int = 0
    powertrain: Powertrain = field(default_factory=Powertrain)
    ecu: Ecu = field(default_factory=Ecu)
    race_control: RaceControl = field(default_factory=RaceControl)
    gauges: Gauges = field(default_factory=Gauges)

    def reset(self) -> None:
        """Restore every telemetry group to its defaults, keeping the frame id."""
        for group in (self.powertrain, self.ecu, self.race_control, self.gauges):
            fresh = type(group)()
            for item in fields(group):
                setattr(group, item.name, getattr(fresh, item.name))