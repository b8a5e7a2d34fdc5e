"""
zenFocus 집중 타이머 API
"""

__version__ = "1.0.0"
