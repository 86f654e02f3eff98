from typing import List, Optional, Protocol
from backend.core.models import ThresholdRecord
from backend.core.loaders import load_thresholds

class ThresholdRepository(Protocol):
    def list_thresholds(self) -> List[ThresholdRecord]:
        ...

class JsonThresholdRepository:
    def __init__(self, path: str):
        self.path = path

    def list_thresholds(self) -> List[ThresholdRecord]:
        # Re-read on every call; the file is small and static
        return load_thresholds(self.path)

class CachedThresholdRepository:
    """
    Keeps the first successful load for the lifetime of the process.
    A failed load is not cached, so the next call tries again.
    """

    def __init__(self, inner: ThresholdRepository):
        self.inner = inner
        self._cached: Optional[List[ThresholdRecord]] = None

    def list_thresholds(self) -> List[ThresholdRecord]:
        if self._cached is None:
            self._cached = self.inner.list_thresholds()
        return list(self._cached)

    def clear(self) -> None:
        self._cached = None
