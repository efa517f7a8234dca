import copy

import pytest

from simwheel.telemetry import TelemetryData
from simwheel.ui import AbstractUserInterface, FrameTimer


def test_frame_timer_below_limit_does_not_expire():
    timer = FrameTimer()
    assert timer.advance(30, 100) == 0
    assert timer.value == 30


@pytest.mark.parametrize("steps", [[250], [40, 40, 40, 90], [99, 1, 100, 7]])
def test_frame_timer_accounts_for_all_time(steps):
    timer = FrameTimer()
    limit = 100
    expirations = sum(timer.advance(step, limit) for step in steps)
    assert expirations * limit + timer.value == sum(steps)
    assert 0 <= timer.value < limit


def test_frame_timer_rejects_zero_limit():
    with pytest.raises(ValueError):
        FrameTimer().advance(10, 0)


def test_defaults():
    ui = AbstractUserInterface()
    assert ui.get_max_fps() == 0
    assert ui.get_stack_size() == 0
    assert ui.requires_powertrain_telemetry is False
    assert ui.requires_gauge_telemetry is False


def test_not_copyable():
    ui = AbstractUserInterface()
    with pytest.raises(TypeError):
        copy.copy(ui)
    with pytest.raises(TypeError):
        copy.deepcopy(ui)


def test_subclass_receives_notifications():
    class Recorder(AbstractUserInterface):
        def __init__(self):
            super().__init__()
            self.events = []

        def on_bite_point(self, bite_point):
            self.events.append(("bite", bite_point))

        def on_telemetry_data(self, telemetry_data):
            self.events.append(("telemetry", telemetry_data))

    ui = Recorder()
    data = TelemetryData()
    ui.on_bite_point(64)
    ui.on_telemetry_data(data)
    ui.on_connected()
    assert ui.events == [("bite", 64), ("telemetry", data)]