from __future__ import annotations
from abc import ABC, abstractmethod
from ..models import Finding, PiiType


class BaseDetector(ABC):
    """Finds identity codes embedded in free text."""

    pii_type: PiiType

    @abstractmethod
    def detect(self, text: str) -> list[Finding]:
        """Return findings ordered by start offset; malformed candidates are skipped."""
        ...
