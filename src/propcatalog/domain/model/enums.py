"""Domain enums (pure, dependency-light)."""

from __future__ import annotations

from enum import StrEnum


class DataType(StrEnum):
    """Shape of the value a configuration property binds to."""

    ATOMIC = "ATOMIC"
    ARRAY = "ARRAY"
    COLLECTION = "COLLECTION"
    MAP = "MAP"


class PropertyType(StrEnum):
    """Logical type of a configuration property."""

    STRING = "STRING"
    BOOLEAN = "BOOLEAN"
    INTEGER = "INTEGER"
    LONG = "LONG"
    DOUBLE = "DOUBLE"
    BIG_DECIMAL = "BIG_DECIMAL"
    DURATION = "DURATION"
    PERIOD = "PERIOD"
    DATA_SIZE = "DATA_SIZE"
    CHARSET = "CHARSET"
    LOCALE = "LOCALE"
    MIME_TYPE = "MIME_TYPE"
    ENUM = "ENUM"
    CLASS = "CLASS"
    RESOURCE = "RESOURCE"
    INET_ADDRESS = "INET_ADDRESS"
    URI = "URI"
    URL = "URL"
    PATTERN = "PATTERN"
    DATE = "DATE"
    TIME = "TIME"
    DATE_TIME = "DATE_TIME"
    OBJECT = "OBJECT"


class RunStatus(StrEnum):
    """Lifecycle states of a scheduled run."""

    STARTED = "STARTED"
    COMPLETED = "COMPLETED"
    FAILED = "FAILED"

    @property
    def is_terminal(self) -> bool:
        return self is not RunStatus.STARTED


class ChangeKind(StrEnum):
    """What happened to a catalog entry during one reconciliation."""

    ADDED = "added"
    UNCHANGED = "unchanged"
    CHANGED = "changed"
    REMOVED = "removed"
