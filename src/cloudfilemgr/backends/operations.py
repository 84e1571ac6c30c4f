"""Backend operations and their simulated latency classes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Operation(str, Enum):
    """Operations of the storage capability interface."""

    AUTHENTICATE = "AUTHENTICATE"
    LIST_FILES = "LIST_FILES"
    DOWNLOAD_FILE = "DOWNLOAD_FILE"
    UPLOAD_FILE = "UPLOAD_FILE"
    CREATE_FOLDER = "CREATE_FOLDER"
    DELETE_FILE = "DELETE_FILE"
    RENAME_FILE = "RENAME_FILE"
    MOVE_FILE = "MOVE_FILE"
    COPY_FILE = "COPY_FILE"
    GET_FILE_METADATA = "GET_FILE_METADATA"


class LatencyClass(str, Enum):
    SHORT = "SHORT"
    LONG = "LONG"
    LOOKUP = "LOOKUP"


LATENCY_CLASS_BY_OPERATION: dict[Operation, LatencyClass] = {
    Operation.AUTHENTICATE: LatencyClass.LONG,
    Operation.LIST_FILES: LatencyClass.SHORT,
    Operation.DOWNLOAD_FILE: LatencyClass.LONG,
    Operation.UPLOAD_FILE: LatencyClass.LONG,
    Operation.CREATE_FOLDER: LatencyClass.SHORT,
    Operation.DELETE_FILE: LatencyClass.SHORT,
    Operation.RENAME_FILE: LatencyClass.SHORT,
    Operation.MOVE_FILE: LatencyClass.SHORT,
    Operation.COPY_FILE: LatencyClass.LONG,
    Operation.GET_FILE_METADATA: LatencyClass.LOOKUP,
}


@dataclass(frozen=True)
class LatencyProfile:
    """Seconds to suspend for each latency class."""

    short_sec: float = 0.3
    long_sec: float = 0.5
    lookup_sec: float = 0.2

    def __post_init__(self) -> None:
        for name in ("short_sec", "long_sec", "lookup_sec"):
            if getattr(self, name) < 0:
                raise ValueError(f"LatencyProfile.{name} must be >= 0")

    @classmethod
    def none(cls) -> LatencyProfile:
        """Profile that never suspends longer than a scheduler yield."""
        return cls(short_sec=0.0, long_sec=0.0, lookup_sec=0.0)

    def scaled(self, factor: float) -> LatencyProfile:
        if factor < 0:
            raise ValueError("latency scale must be >= 0")
        return LatencyProfile(
            short_sec=self.short_sec * factor,
            long_sec=self.long_sec * factor,
            lookup_sec=self.lookup_sec * factor,
        )

    def delay_for(self, operation: Operation) -> float:
        latency_class = LATENCY_CLASS_BY_OPERATION[operation]
        if latency_class is LatencyClass.LONG:
            return self.long_sec
        if latency_class is LatencyClass.LOOKUP:
            return self.lookup_sec
        return self.short_sec
