"""
Hyperlane Validator Setup - host provisioning and validator launcher
"""

__version__ = "0.1.0"

from .core import HyperlaneSetup, SetupError

__all__ = ["HyperlaneSetup", "SetupError"]
