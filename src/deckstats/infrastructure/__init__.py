# Infrastructure Package
from .files import read_template, write_output
from .sqlite_source import SqliteRecordSource

__all__ = ["SqliteRecordSource", "read_template", "write_output"]
