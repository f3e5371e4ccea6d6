"""Detection of thermal propagation from incidents on neighbouring sensors."""

from __future__ import annotations

import operator
import struct
from dataclasses import dataclass

from .log import LogLevel, log
from .sensor import DataType

# Incidents are only reported on the terminal during the first part of a run.
_LOG_TIME_LIMIT = 210.0

# Per data type: reading name, calibration threshold, comparison that flags it.
_CHECKS = {
    DataType.TEMPERATURE: ("temperature", "temperature_threshold", operator.ge),
    DataType.VOLTAGE: ("voltage", "voltage_threshold", operator.gt),
    DataType.PRESSURE: ("pressure", "pressure_threshold", operator.ge),
}


def _single(value):
    """Round ``value`` to single precision, the precision of the recorded data."""
    return struct.unpack("f", struct.pack("f", value))[0]


def _absolute_rate(delta_value, delta_time):
    """Return |delta_value / delta_time|, or 0 when no time has passed."""
    if delta_time > 0.0:
        return abs(delta_value / delta_time)
    return 0.0


@dataclass
class Incident:
    """A reading whose rate of change went beyond its threshold."""

    sensor_id: int
    data_type: DataType
    delta: float
    time: float


class BMSMonitor:
    """Watches sensor readings and flags propagation between neighbours.

    Propagation is detected when a sensor has an incident and one of its
    neighbours recently had an incident of a different data type. When the
    pack has a pressure sensor, one of the two incidents must be a pressure
    incident.
    """

    def __init__(self, sensors=None, pressure_sensor_exists=False):
        self.sensors = [] if sensors is None else sensors
        self.incidents = []
        self.pressure_sensor_exists = pressure_sensor_exists
        self.propagation_detected = False
        self.last_propagation_time = -1.0

    def evaluate(self, calibration, mapper):
        """Feed the next data point from ``mapper`` and return whether propagation was detected."""
        self.propagation_detected = False
        point = mapper.next_data_point(self.sensors)
        if point is None:
            return False

        sensor_id, data_type = point
        sensor = self.sensors[sensor_id]
        name, threshold_name, exceeds = _CHECKS[data_type]
        delta_value = getattr(sensor, f"current_{name}") - getattr(sensor, f"last_{name}")
        rate = _absolute_rate(delta_value, sensor.current_time - sensor.last_time)
        if exceeds(rate, getattr(calibration, threshold_name)):
            self._handle_incident(calibration, sensor_id, data_type, rate)
        return self.propagation_detected

    def _handle_incident(self, calibration, sensor_id, data_type, rate):
        current_time = self.sensors[sensor_id].current_time
        if current_time < _LOG_TIME_LIMIT:
            log(
                LogLevel.WARNING,
                f"Sensor {sensor_id} detected delta beyond acceptable limit: "
                f"{rate:f} within {_LOG_TIME_LIMIT:f} seconds of read data "
                f"(at time {current_time:f})",
            )
        self.save_incident(sensor_id, rate, data_type)
        self.update_propagation(calibration, self.sensors)

    def save_incident(self, sensor_id, delta, data_type, time=None):
        """Record an incident; ``time`` defaults to the sensor's current time."""
        if time is None:
            time = self.sensors[sensor_id].current_time
        incident = Incident(sensor_id, DataType(data_type), delta, _single(time))
        self.incidents.append(incident)
        return incident

    def remove_unrelated_incidents(self, calibration):
        """Drop incidents too old to be related to the latest one."""
        if len(self.incidents) < 2:
            return
        latest = self.incidents[-1]
        window = _single(calibration.max_time_between_related_incidents)
        first_related = next(
            (
                index
                for index, incident in enumerate(self.incidents[:-1])
                if _single(latest.time - incident.time) < window
            ),
            len(self.incidents) - 1,
        )
        del self.incidents[:first_related]

    def update_propagation(self, calibration, sensors):
        """Decide whether the latest incident shows propagation; return the result."""
        self.remove_unrelated_incidents(calibration)
        self.propagation_detected = False
        if len(self.incidents) < 2:
            return False

        latest = self.incidents[-1]
        latest_sensor = sensors[latest.sensor_id]
        neighbours = latest_sensor.neighbour_ids
        for incident in self.incidents:
            if incident.sensor_id not in neighbours:
                continue
            if incident.data_type == latest.data_type:
                continue
            if self.pressure_sensor_exists and DataType.PRESSURE not in (
                incident.data_type,
                latest.data_type,
            ):
                continue
            self.propagation_detected = True
            self.last_propagation_time = latest_sensor.current_time
            return True
        return False

    def clear_incidents(self):
        """Forget all recorded incidents."""
        self.incidents.clear()