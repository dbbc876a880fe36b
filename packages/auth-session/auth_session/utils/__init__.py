"""
Session Utilities Module
Provides endpoint URL building and time-derived identifiers.
"""
from .ids import time_id, token_name
from .url_builder import URLBuilder

__all__ = ["URLBuilder", "time_id", "token_name"]
