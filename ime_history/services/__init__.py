"""Decoding and reporting services for IME History."""

from .header_reader import HeaderReader
from .record_walker import DecodedSubstitution, RecordWalker
from .report_service import ReportService
from .substitution_decoder import SubstitutionDecoder

__all__ = [
    "HeaderReader",
    "RecordWalker",
    "DecodedSubstitution",
    "SubstitutionDecoder",
    "ReportService",
]
