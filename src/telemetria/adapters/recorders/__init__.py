"""Recorder adapters implementing RecorderPort."""

from telemetria.adapters.recorders.factory import new_recorder
from telemetria.adapters.recorders.influx import SimpleRecorder
from telemetria.adapters.recorders.noop import NoRecorder

__all__ = [
    "NoRecorder",
    "SimpleRecorder",
    "new_recorder",
]
