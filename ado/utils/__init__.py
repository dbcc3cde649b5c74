"""Utility modules for platform detection, logging, and PATH editing."""

from .platform_check import get_os_type, is_admin, get_platform, OSType, PlatformInfo
from .logger import setup_logger, get_logger, LogLevel
from .path_list import add_entry, remove_entry, contains_entry, split_entries

__all__ = [
    "get_os_type",
    "is_admin",
    "get_platform",
    "OSType",
    "PlatformInfo",
    "setup_logger",
    "get_logger",
    "LogLevel",
    "add_entry",
    "remove_entry",
    "contains_entry",
    "split_entries",
]
