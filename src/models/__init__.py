"""
Data models for the content sync pipeline.

This module contains pure data classes with no business logic.
"""

from .snapshot import ProductSnapshot, SyncResult, SyncRunReport

__all__ = ['ProductSnapshot', 'SyncResult', 'SyncRunReport']
