import pytest

from bmsprop.calibration import Calibration, has_pressure_sensor
from bmsprop.sensor import add_sensor


def test_threshold_set_and_get_correctly():
    calibration = Calibration()
    calibration.set_thresholds(10.5, 4.2, 8.1, 60.0)

    assert calibration.temperature_threshold == pytest.approx(10.5)
    assert calibration.voltage_threshold == pytest.approx(4.2)
    assert calibration.pressure_threshold == pytest.approx(8.1)
    assert calibration.max_time_between_related_incidents == pytest.approx(60.0)


def test_default_thresholds():
    calibration = Calibration()
    assert calibration.temperature_threshold == pytest.approx(3.0)
    assert calibration.voltage_threshold == pytest.approx(0.01)
    assert calibration.pressure_threshold == pytest.approx(3.0)
    assert calibration.max_time_between_related_incidents == pytest.approx(60.0)


def test_sensor_setup_detects_pressure_sensor():
    calibration = Calibration(with_pressure_sensor=False)
    sensors = []

    assert calibration.sensor_setup(sensors) is False
    assert len(sensors) == 10
    assert all(not sensor.is_pressure for sensor in sensors)

    sensors.clear()
    assert len(sensors) == 0
    add_sensor(sensors, True, False, False)
    add_sensor(sensors, False, True, False)
    add_sensor(sensors, False, False, True)
    add_sensor(sensors, False, True, False)
    add_sensor(sensors, True, False, False)
    assert len(sensors) == 5
    assert has_pressure_sensor(sensors) is True


def test_sensor_setup_correct_neighbour_mapping():
    calibration = Calibration(with_pressure_sensor=False)
    sensors = []
    calibration.sensor_setup(sensors)
    assert len(sensors) == 10
    assert sensors[1].neighbour_ids == [0, 2, 5, 6]
    assert sensors[9].neighbour_ids == [4, 8]


def test_default_setup_has_pressure_sensor():
    sensors = []
    assert Calibration().sensor_setup(sensors) is True
    assert len(sensors) == 10
    assert [s.id for s, in zip(sensors) if s.is_pressure] == [5]
    assert sensors[5].neighbour_ids == [0, 1, 5, 6]
    assert sensors[9].neighbour_ids == [4, 5, 8]


@pytest.mark.parametrize("with_pressure", [True, False])
def test_setup_sensor_kinds(with_pressure):
    sensors = []
    Calibration(with_pressure_sensor=with_pressure).sensor_setup(sensors)
    assert [s.id for s in sensors] == list(range(10))
    assert all(s.is_voltage for s in sensors[:5])
    assert all(s.is_temperature for s in sensors[6:])
    assert sensors[5].is_temperature is (not with_pressure)
    assert sensors[5].is_pressure is with_pressure


def test_has_pressure_sensor_empty():
    assert has_pressure_sensor([]) is False