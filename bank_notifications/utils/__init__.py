"""Utility helpers for reusable functionality."""

from .clock import AppClock, parse_timezone

__all__ = ["AppClock", "parse_timezone"]
