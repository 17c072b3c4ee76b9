from __future__ import annotations
import re
from datetime import date
from .base import BaseDetector
from ..exceptions import InvalidDate
from ..models import Finding, PiiType
from ..pic import PIC_PATTERN, parse

# Finnish henkilötunnus inside running text, e.g. "Hetu: 131052-308T".
# Word boundaries keep us from matching inside longer alphanumeric runs.
_PIC_IN_TEXT = re.compile(r"\b" + PIC_PATTERN.pattern + r"\b")


class FinnishPicDetector(BaseDetector):
    pii_type = PiiType.FINNISH_PIC

    def __init__(self, today: date | None = None) -> None:
        self._today = today

    def detect(self, text: str) -> list[Finding]:
        findings: list[Finding] = []
        for match in _PIC_IN_TEXT.finditer(text):
            raw = match.group()
            try:
                parsed = parse(raw, today=self._today)
            except InvalidDate:
                continue  # right shape, but no such day
            findings.append(
                Finding(
                    pii_type=self.pii_type,
                    start=match.start(),
                    end=match.end(),
                    text=raw,
                    confidence=0.95 if parsed.valid else 0.6,
                    sex=parsed.sex,
                    date_of_birth=parsed.date_of_birth,
                )
            )
        return findings
