from simwheel.telemetry import Ecu, Gauges, Powertrain, RaceControl, TelemetryData


def test_defaults_match_source():
    data = TelemetryData()
    assert data.powertrain.gear == " "
    assert data.powertrain.rpm == 0
    assert data.ecu.abs_engaged is False
    assert data.gauges.oil_pressure == 0.0


def test_groups_are_independent_between_frames():
    first = TelemetryData()
    second = TelemetryData()
    first.powertrain.rpm = 1630
    assert second.powertrain.rpm == 0


def test_reset_restores_all_groups():
    data = TelemetryData()
    data.powertrain.gear = "K"
    data.powertrain.speed = 320
    data.ecu.tc_level = 7
    data.race_control.remaining_laps = 2530
    data.gauges.absolute_turbo_pressure = 1.13
    data.reset()
    assert data.powertrain == Powertrain()
    assert data.ecu == Ecu()
    assert data.race_control == RaceControl()
    assert data.gauges == Gauges()


def test_reset_keeps_frame_id_and_group_identity():
    data = TelemetryData(frame_id=42)
    powertrain = data.powertrain
    powertrain.rev_limiter = True
    data.reset()
    assert data.frame_id == 42
    assert data.powertrain is powertrain
    assert powertrain.rev_limiter is False


def test_equality_compares_contents():
    a = TelemetryData()
    b = TelemetryData()
    assert a == b
    b.race_control.yellow_flag = True
    assert a != b
    assert b.race_control.yellow_flag is True