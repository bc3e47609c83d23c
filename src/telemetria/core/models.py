"""Core domain models for time-series data."""

from collections.abc import Mapping
from dataclasses import dataclass, field

FieldValue = str | int | float | bool


@dataclass(frozen=True)
class Metric:
    """A named set of field values destined for a time-series store.

    Attributes:
        name: Measurement name. In InfluxDB this is the table.
        fields: Field keys and values. Values may be strings, floats,
            integers or booleans; they become the columns of the row.
        tags: Optional indexed metadata used for searching and aggregating
            related metrics.
    """

    name: str
    fields: Mapping[str, FieldValue]
    tags: Mapping[str, str] = field(default_factory=dict)
