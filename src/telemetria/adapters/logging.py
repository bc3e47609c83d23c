"""Python logging handler adapter for telemetria.

This adapter bridges Python's standard library logging module to a
RecorderPort, so log records can be stored as time-series metrics.
"""

import logging
import traceback

from telemetria.core.models import FieldValue, Metric
from telemetria.core.ports import RecorderPort

# Standard LogRecord attributes that should not be treated as extra fields
_STANDARD_LOGRECORD_ATTRS = frozenset(
    {
        "args",
        "asctime",
        "created",
        "exc_info",
        "exc_text",
        "filename",
        "funcName",
        "levelname",
        "levelno",
        "lineno",
        "message",
        "module",
        "msecs",
        "msg",
        "name",
        "pathname",
        "process",
        "processName",
        "relativeCreated",
        "stack_info",
        "taskName",
        "thread",
        "threadName",
    }
)

# Default attributes to extract from LogRecord
_DEFAULT_INCLUDE_ATTRS = ["module", "funcName", "lineno"]


class RecorderHandler(logging.Handler):
    """Logging handler that writes log records to a RecorderPort.

    Each record becomes one Metric tagged with its level and logger name.

    Example:
        ```python
        from telemetria import RecorderHandler, new_recorder

        handler = RecorderHandler(new_recorder("udp://localhost:8089/logs"))
        logging.getLogger().addHandler(handler)
        ```
    """

    def __init__(
        self,
        recorder: RecorderPort,
        measurement: str = "logs",
        include_attrs: list[str] | None = None,
        level: int = logging.NOTSET,
    ) -> None:
        """Initialize the handler with a recorder.

        Args:
            recorder: Recorder implementing RecorderPort.
            measurement: Metric name used for every record (default "logs").
            include_attrs: LogRecord attributes stored as fields. Defaults to
                ["module", "funcName", "lineno"].
            level: Minimum level handled.
        """
        super().__init__(level)
        self._recorder = recorder
        self._measurement = measurement
        self._include_attrs = (
            _DEFAULT_INCLUDE_ATTRS if include_attrs is None else include_attrs
        )

    def to_metric(self, record: logging.LogRecord) -> Metric:
        """Convert a log record into a Metric."""
        attr_mapping: dict[str, FieldValue] = {
            "module": record.module,
            "funcName": record.funcName or "",
            "lineno": record.lineno,
            "pathname": record.pathname,
        }

        fields: dict[str, FieldValue] = {"message": record.getMessage()}
        fields.update(
            {key: attr_mapping[key] for key in self._include_attrs if key in attr_mapping}
        )

        # Add any extra attributes passed via logging call
        for key, value in record.__dict__.items():
            if key not in _STANDARD_LOGRECORD_ATTRS and isinstance(
                value, (str, int, float, bool)
            ):
                fields[key] = value

        if record.exc_info:
            exc_type, exc_value, exc_tb = record.exc_info
            if exc_type is not None:
                fields["exc_type"] = exc_type.__name__
            if exc_value is not None:
                fields["exc_message"] = str(exc_value)
            if exc_tb is not None:
                fields["exc_traceback"] = "".join(
                    traceback.format_exception(exc_type, exc_value, exc_tb)
                )

        return Metric(
            name=self._measurement,
            fields=fields,
            tags={"level": record.levelname, "logger": record.name},
        )

    def emit(self, record: logging.LogRecord) -> None:
        """Write the record through the recorder.

        Records from telemetria's own loggers are skipped, since writing them
        would log again.

        Args:
            record: The log record to emit.
        """
        if record.name == "telemetria" or record.name.startswith("telemetria."):
            return
        try:
            self._recorder.write_one(self.to_metric(record))
        except Exception:
            self.handleError(record)
