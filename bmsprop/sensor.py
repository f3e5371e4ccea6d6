"""Battery pack sensors and the kinds of data they measure."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import ClassVar

from .log import LogLevel, log

NULL_VALUE = -999.0


class DataType(enum.IntEnum):
    """Kind of measurement carried by a data point."""

    TEMPERATURE = 0
    VOLTAGE = 1
    PRESSURE = 2


@dataclass(eq=False)
class Sensor:
    """A sensor with its latest and previous readings and its neighbours.

    A sensor with a negative id is a scratch instance and is not announced.
    """

    null_value: ClassVar[float] = NULL_VALUE

    id: int = -1
    is_temperature: bool = False
    is_voltage: bool = False
    is_pressure: bool = False

    current_temperature: float = NULL_VALUE
    current_voltage: float = NULL_VALUE
    current_pressure: float = NULL_VALUE
    current_time: float = NULL_VALUE

    last_temperature: float = NULL_VALUE
    last_voltage: float = NULL_VALUE
    last_pressure: float = NULL_VALUE
    last_time: float = NULL_VALUE

    neighbour_ids: list[int] = field(default_factory=list)

    def __post_init__(self):
        if self.id >= 0:
            log(
                LogLevel.INFO,
                f"Sensor {self.id} meassure: "
                f"Temperature: {int(self.is_temperature)}, "
                f"Voltage: {int(self.is_voltage)}, "
                f"Pressure: {int(self.is_pressure)}",
            )

    def add_neighbours(self, neighbour_ids):
        """Append the given sensor ids to this sensor's neighbours."""
        self.neighbour_ids.extend(int(i) for i in neighbour_ids)


def add_sensor(sensors, is_temperature, is_voltage, is_pressure):
    """Create a sensor whose id is its position in ``sensors`` and append it."""
    sensor = Sensor(len(sensors), is_temperature, is_voltage, is_pressure)
    sensors.append(sensor)
    return sensor