"""Feed recorded test data to sensors one data point at a time."""

from __future__ import annotations

import os
import re

from .calibration import has_pressure_sensor
from .log import LogLevel, log
from .sensor import NULL_VALUE, DataType

ORDER_WITHOUT_PRESSURE = (DataType.TEMPERATURE, DataType.VOLTAGE)
ORDER_WITH_PRESSURE = (DataType.PRESSURE, DataType.TEMPERATURE, DataType.VOLTAGE)

_FLOAT_PREFIX = re.compile(
    r"\s*[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan)",
    re.IGNORECASE,
)

_FIELD_NAMES = {
    DataType.TEMPERATURE: "temperature",
    DataType.VOLTAGE: "voltage",
    DataType.PRESSURE: "pressure",
}


def _leading_float(text):
    """Return the float at the start of ``text`` and whether it used all of it."""
    match = _FLOAT_PREFIX.match(text)
    if match is None:
        return None, False
    return float(match.group()), match.end() == len(text)


def _parse_txt_line(line):
    values = []
    for token in line.split():
        value, whole = _leading_float(token)
        if value is None:
            break
        values.append(value)
        if not whole:
            break
    return values


def _parse_csv_line(line):
    parts = line.split(";")
    if parts and parts[-1] == "":
        parts.pop()
    values = []
    for part in parts:
        value, _ = _leading_float(part)
        if value is None:
            log(
                LogLevel.DEBUG,
                f"{part} could not be converted to a float. "
                "Row of potential data not saved",
            )
            break
        values.append(value)
    return values


def parse_rows(lines, file_type):
    """Parse text lines into rows of floats.

    ``file_type`` is ".csv" (fields separated by ';') or ".txt" (fields
    separated by whitespace). Parsing of a line stops at the first field
    that does not start with a number; lines that yield no numbers are
    dropped.
    """
    if file_type == ".txt":
        parse_line = _parse_txt_line
    elif file_type == ".csv":
        parse_line = _parse_csv_line
    else:
        log(LogLevel.ERROR, "Unknown file type. (use .csv or .txt)")
        raise ValueError(f"unknown file type {file_type!r} (use .csv or .txt)")

    rows = []
    for line in lines:
        values = parse_line(line.rstrip("\n"))
        if values:
            rows.append(values)
    return rows


class TestDataMapper:
    """Hands out recorded data points to the sensors that measure them.

    Each row holds the time in its first column followed by data points
    grouped by type, in the order given by ``data_type_order``. Within a
    type, data points go to matching sensors in sensor order.
    """

    __test__ = False

    def __init__(self, data_type_order=()):
        self.rows = []
        self.data_type_order = list(data_type_order)
        self.more_data_available = True
        self._reset_position()

    def _reset_position(self):
        self._row_index = 0
        self._column_index = 1  # column 0 holds the time
        self._next_sensor_index = 0
        self._type_index = 0

    def read_file(self, path, sensors):
        """Load rows from a .csv or .txt file and pick the type order for ``sensors``."""
        path_text = os.fspath(path)
        try:
            with open(path_text, encoding="utf-8") as handle:
                new_rows = parse_rows(handle, path_text[-4:])
        except OSError:
            log(LogLevel.ERROR, f"File could not be opened: {path_text}")
            raise
        self.rows.extend(new_rows)
        if not self.rows:
            raise ValueError(f"no data rows found in {path_text}")
        log(
            LogLevel.INFO,
            f"Data read from file {path_text}. Rows, columns = "
            f"{len(self.rows)}, {len(self.rows[0])}",
        )
        self._set_data_type_order(sensors)

    def _set_data_type_order(self, sensors):
        if has_pressure_sensor(sensors):
            self.data_type_order = list(ORDER_WITH_PRESSURE)
        else:
            self.data_type_order = list(ORDER_WITHOUT_PRESSURE)

    def set_data(self, rows):
        """Replace the data rows and start again from the first data point."""
        self.rows = [list(row) for row in rows]
        self.more_data_available = True
        self._reset_position()

    def next_data_point(self, sensors):
        """Give the next data point to the next sensor that measures its type.

        Returns ``(sensor_id, data_type)`` for the sensor that was updated, or
        ``None`` when no sensor took a data point this time.
        """
        if not self.more_data_available:
            return None
        if not self.data_type_order:
            raise RuntimeError("data type order is not set")

        data_type = self.data_type_order[self._type_index]
        row = self.rows[self._row_index]
        value = row[self._column_index]
        name = _FIELD_NAMES[data_type]

        for index, sensor in enumerate(
            sensors[self._next_sensor_index:], self._next_sensor_index
        ):
            if getattr(sensor, f"is_{name}"):
                _store(sensor, name, value)
                _store(sensor, "time", row[0])
                self._advance(index, len(sensors))
                return index, data_type

        self._advance(None, len(sensors))
        return None

    def _advance(self, sensor_index, sensor_count):
        last_column = len(self.rows[self._row_index]) - 1

        if sensor_index is None or sensor_index + 1 >= sensor_count:
            self._next_sensor_index = 0
            self._type_index += 1
        else:
            # Skip sensors that already received data for this type.
            self._next_sensor_index = sensor_index + 1

        if sensor_index is not None:
            if self._column_index < last_column:
                self._column_index += 1
            else:
                self._column_index = 1
                self._row_index += 1
                self._type_index = 0

        if self._type_index >= len(self.data_type_order):
            self._type_index = 0

        if self._row_index >= len(self.rows):
            log(LogLevel.INFO, "All data read.")
            self.more_data_available = False


def _store(sensor, name, value):
    """Shift the sensor's current reading to last and set the new one."""
    current = getattr(sensor, f"current_{name}")
    setattr(sensor, f"last_{name}", current if current != NULL_VALUE else value)
    setattr(sensor, f"current_{name}", value)