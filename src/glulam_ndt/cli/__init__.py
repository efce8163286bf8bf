"""
Command-line interface for glulam-ndt.

Provides commands for analyzing thickness-wise and depth-wise
ultrasonic scans of glulam beams.
"""

from .main import app, main

__all__ = ["main", "app"]
