"""Sensor layout and detection thresholds for the battery pack."""

from __future__ import annotations

from dataclasses import dataclass

from .sensor import add_sensor

# Neighbour maps: adjacent sensors, plus the pressure sensor where it exists.
_NEIGHBOURS_WITH_PRESSURE = (
    (1, 5),
    (0, 2, 5, 6),
    (1, 3, 5, 6, 7),
    (2, 4, 5, 7, 8),
    (3, 5, 8, 9),
    (0, 1, 5, 6),
    (1, 2, 5, 7),
    (2, 3, 5, 6, 8),
    (3, 4, 5, 7, 9),
    (4, 5, 8),
)

_NEIGHBOURS_WITHOUT_PRESSURE = (
    (1, 5),
    (0, 2, 5, 6),
    (1, 3, 6, 7),
    (2, 4, 7, 8),
    (3, 8, 9),
    (0, 1, 6),
    (1, 2, 5, 7),
    (2, 3, 6, 8),
    (3, 4, 7, 9),
    (4, 8),
)


def has_pressure_sensor(sensors):
    """Return whether any of ``sensors`` measures pressure."""
    return any(sensor.is_pressure for sensor in sensors)


@dataclass
class Calibration:
    """Rate-of-change thresholds and the research-based sensor layout.

    Thresholds are absolute rates of change per second. With
    ``with_pressure_sensor`` the sensor between cells 1 and 2 measures
    pressure instead of temperature.
    """

    temperature_threshold: float = 3.0
    voltage_threshold: float = 0.01
    pressure_threshold: float = 3.0
    max_time_between_related_incidents: float = 60.0
    with_pressure_sensor: bool = True

    def sensor_setup(self, sensors):
        """Append the pack's ten sensors to ``sensors``; return whether one measures pressure."""
        # Voltage sensors: U_Cell 1 to 5, ids 0-4.
        for _ in range(5):
            add_sensor(sensors, False, True, False)

        if self.with_pressure_sensor:
            # id 5: between cells 1 and 2, measuring pressure.
            add_sensor(sensors, False, False, True)
            neighbour_map = _NEIGHBOURS_WITH_PRESSURE
        else:
            add_sensor(sensors, True, False, False)
            neighbour_map = _NEIGHBOURS_WITHOUT_PRESSURE
        # Temperature sensors: T_Cell 2_3, 3_4, 4_5, 5_Insulation, ids 6-9.
        for _ in range(4):
            add_sensor(sensors, True, False, False)

        for sensor, neighbours in zip(sensors[:10], neighbour_map):
            sensor.add_neighbours(neighbours)

        return has_pressure_sensor(sensors)

    def set_thresholds(self, temperature, voltage, pressure, time_delta):
        """Replace all rate thresholds and the window for related incidents."""
        self.temperature_threshold = temperature
        self.voltage_threshold = voltage
        self.pressure_threshold = pressure
        self.max_time_between_related_incidents = time_delta