"""
IME History - Japanese IME Input History Recovery Tool

Recovers the conversion history recorded by the Japanese IME
predictive-text subsystem (JpnIHDS.dat) as a chronological text report.
"""

__version__ = "1.0.0"
__author__ = "IME History Contributors"
