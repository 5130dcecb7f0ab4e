"""Orchestration for coordinating decoding services."""

from .history_decoder import HistoryDecoder

__all__ = ["HistoryDecoder"]
