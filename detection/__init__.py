"""
Block-type detectors and the row segmenter.

The canonical evaluation order is:
  1. ListDetector   — spans whose name ends with "list"
  2. TableDetector  — everything else (default / fallback)
"""

from detection.base import Detector
from detection.list import ListDetector
from detection.segmenter import find_spans, segment
from detection.table import TableDetector

__all__ = [
    "Detector",
    "ListDetector",
    "TableDetector",
    "find_spans",
    "segment",
]
