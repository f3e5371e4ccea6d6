"""Command line entry point: scan a recorded data file for propagation."""

from __future__ import annotations

import argparse

from .calibration import Calibration
from .log import LogLevel, log
from .mapper import TestDataMapper
from .monitor import BMSMonitor


def run(path, testing=True):
    """Evaluate every data point in ``path``; return the times propagation was detected.

    With ``testing`` only the first detection is logged; otherwise every
    evaluation is logged, whether it detected propagation or not.
    """
    monitor = BMSMonitor()
    calibration = Calibration()
    monitor.pressure_sensor_exists = calibration.sensor_setup(monitor.sensors)
    mapper = TestDataMapper()
    mapper.read_file(path, monitor.sensors)

    detections = []
    while mapper.more_data_available:
        if monitor.evaluate(calibration, mapper):
            time = monitor.last_propagation_time
            if not testing or not detections:
                log(LogLevel.ERROR, f"Propagation detected at time {time:f}")
            detections.append(time)
        elif not testing:
            log(LogLevel.INFO, "Propagation not detected")
    return detections


def main(argv=None):
    """Run the propagation scan from the command line; return the exit status."""
    parser = argparse.ArgumentParser(
        prog="bmsprop",
        description="Detect thermal propagation in recorded battery sensor data.",
    )
    parser.add_argument("data_file", help="a .csv (';'-separated) or .txt data file")
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="log every evaluation and every detection",
    )
    args = parser.parse_args(argv)
    try:
        run(args.data_file, testing=not args.verbose)
    except OSError:
        return 1
    except ValueError as error:
        log(LogLevel.ERROR, str(error))
        return 1
    return 0