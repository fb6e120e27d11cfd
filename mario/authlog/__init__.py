from .records import AuthLogRecord
from .store import AuthLogStore

__all__ = ["AuthLogRecord", "AuthLogStore"]
