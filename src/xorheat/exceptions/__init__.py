"""Exception hierarchy for xorheat."""

from .base import XorHeatError
from .config import ConfigurationError, InvalidConfigError
from .tree import DepthOutOfRangeError, TreeError, UnknownNodeError

__all__ = [
    "XorHeatError",
    "ConfigurationError",
    "InvalidConfigError",
    "TreeError",
    "DepthOutOfRangeError",
    "UnknownNodeError",
]
