"""Utility modules for matchlex.

Provides:
- logger: get_logger for logging
"""

from matchlex.utils.logger import get_logger

__all__ = ["get_logger"]
