"""
Maven repository integration for mavenship.

This module provides functionality to bundle and publish JVM artifacts to Maven repositories.
"""

from .bundle import BundleAssembler, BundleResult
from .config import MavenConfig
from .publisher import MavenPublisher
from .signing import SigningConfig

__all__ = ['BundleAssembler', 'BundleResult', 'MavenConfig', 'MavenPublisher', 'SigningConfig']
