"""
Utility helpers.
"""

from primevue_mcp.utils.logging import get_logger, set_log_level

__all__ = ["get_logger", "set_log_level"]
