"""Error hierarchy for the scan -> extract -> publish pipeline"""

from typing import Any


class MdfeedError(Exception):
    """Base class for all fatal build errors."""


class ScanError(MdfeedError):
    """A directory, entry, or source file could not be read."""

    def __init__(self, path, cause: Exception):
        self.path = str(path)
        self.cause = cause
        super().__init__(f"Cannot read {self.path}: {cause}")


class CompileError(MdfeedError):
    """A source document could not be compiled into (meta, tree)."""

    def __init__(self, path, cause: Exception):
        self.path = str(path)
        self.cause = cause
        super().__init__(f"Failed to compile {self.path}: {cause}")


class MetadataMissingError(MdfeedError):
    """Neither explicit metadata nor a structural fallback exists for a field."""

    def __init__(self, path, field: str, detail: str = None):
        self.path = str(path)
        self.field = field
        super().__init__(
            f"No {field} for {self.path}: {detail or f'set meta.{field} or add a fallback block'}"
        )


class InvalidDateError(MetadataMissingError):
    """meta.date is absent or unparseable (raised only when dates are strict)."""

    def __init__(self, path, value: Any):
        self.value = value
        super().__init__(path, "date", f"cannot parse {value!r} as a date")


class SerializationError(MdfeedError):
    """An output artifact could not be rendered."""

    def __init__(self, target: str, cause: Exception):
        self.target = target
        self.cause = cause
        super().__init__(f"Failed to serialize {target}: {cause}")


class WriteError(MdfeedError):
    """An output artifact could not be written."""

    def __init__(self, path, cause: Exception):
        self.path = str(path)
        self.cause = cause
        super().__init__(f"Failed to write {self.path}: {cause}")
