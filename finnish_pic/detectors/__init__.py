from .base import BaseDetector
from .finnish_pic import FinnishPicDetector

__all__ = [
    "BaseDetector",
    "FinnishPicDetector",
]
