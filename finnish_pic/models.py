from __future__ import annotations
from dataclasses import dataclass
from datetime import date
from enum import Enum


class Sex(str, Enum):
    MALE = "male"
    FEMALE = "female"


MALE = Sex.MALE
FEMALE = Sex.FEMALE


class PiiType(str, Enum):
    FINNISH_PIC = "FINNISH_PIC"


@dataclass(frozen=True)
class ParsedPic:
    valid: bool  # checksum matched; date and sex are filled in regardless
    sex: Sex
    date_of_birth: date
    age_in_years: int


@dataclass(frozen=True)
class Finding:
    pii_type: PiiType
    start: int
    end: int
    text: str
    confidence: float
    sex: Sex
    date_of_birth: date

    def __len__(self) -> int:
        return self.end - self.start
