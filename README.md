# bmsprop

Detects thermal propagation in a battery pack by replaying recorded sensor
data through a simple battery monitoring model.

Each data point is assigned to a sensor that measures temperature, voltage or
pressure. For every point, the monitor computes the absolute rate of change
since that sensor's previous reading. It records an incident when the rate
crosses the calibrated threshold. For temperature and pressure the incident is
recorded when the rate equals or exceeds the threshold. For voltage the rate
must exceed it.

Incidents that are older than the calibrated window, measured back from the
latest incident, are dropped. Propagation is reported when the latest
incident's sensor has a neighbour with a recent incident of a different type.
If the pack has a pressure sensor, one of those two incidents must be a
pressure incident.

## Installation

```
pip install .
```

## Command line

```
bmsprop path/to/data.csv
bmsprop --verbose path/to/data.txt
```

Supported data files:

- `.csv` files, with values separated by `;`.
- `.txt` files, with values separated by whitespace.

The first column of each row is the time in seconds. The remaining columns are
readings grouped by type. With the default sensor layout, which includes a
pressure sensor, the groups come in the order pressure, temperature, voltage.
Without a pressure sensor the order is temperature, voltage. Parsing a line
stops at the first field that does not start with a number. Lines that yield
no numbers are skipped.

All output goes to standard error as coloured log lines:

- Incident warnings, for incidents before 210 seconds.
- The first propagation detection.
- With `--verbose`, every detection and every evaluation that found no
  propagation.

The command exits with status 1 in these cases:

- The file cannot be opened.
- Its type is neither `.csv` nor `.txt`.
- It holds no data rows.

## Library use

```python
from bmsprop.calibration import Calibration
from bmsprop.mapper import TestDataMapper
from bmsprop.monitor import BMSMonitor

calibration = Calibration()
monitor = BMSMonitor()
monitor.pressure_sensor_exists = calibration.sensor_setup(monitor.sensors)

mapper = TestDataMapper()
mapper.read_file("data.csv", monitor.sensors)
while mapper.more_data_available:
    if monitor.evaluate(calibration, mapper):
        print("propagation at", monitor.last_propagation_time)
```

- `Calibration.sensor_setup(sensors)` appends the ten-sensor layout to
  `sensors`, with its neighbour map. It returns whether a pressure sensor
  exists. Pass `with_pressure_sensor=False` to `Calibration` for an
  all-temperature layout.
- `Calibration.set_thresholds(temperature, voltage, pressure, time_delta)` sets
  the rate-of-change thresholds. It also sets the longest time between related
  incidents.
- `TestDataMapper.read_file(path, sensors)` loads a data file.
  `TestDataMapper.set_data(rows)` loads rows directly, and
  `parse_rows(lines, file_type)` parses text lines.
- `TestDataMapper.next_data_point(sensors)` gives the next value to its sensor.
  It returns `(sensor_id, data_type)`, or `None` when no sensor took a value.
- `BMSMonitor.evaluate(calibration, mapper)` processes one data point. It
  returns whether propagation was detected. Recorded incidents are kept in
  `BMSMonitor.incidents`.
- `bmsprop.cli.run(path, testing)` runs a whole file. It returns the times at
  which propagation was detected.

## Limitations

bmsprop only replays recorded data files. It does not read live sensors and
does not act on a detection beyond logging it. Its sensor layout and
neighbour map are fixed to one ten-sensor pack.

## Tests

```
pip install .[test]
pytest
```