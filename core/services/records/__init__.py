from .seed import seed_records
from .store import RecordStore

__all__ = ["RecordStore", "seed_records"]
