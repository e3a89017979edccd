from typing import TypeVar

ConfigType = TypeVar("ConfigType")
"""A module's stack configuration dataclass"""

ExportsType = TypeVar("ExportsType")
"""A module's exports dataclass"""
