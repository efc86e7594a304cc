"""
Fes Notes backend - personal notes with per-user sharing.

Version: 1.0.0
"""

__version__ = "1.0.0"
