"""
Testing utilities module.

Provides helpers for testing code built on miraveja-boot.
"""

from .utilities import RegistrySnapshot, TestKernel, create_test_kernel

__all__ = [
    "TestKernel",
    "create_test_kernel",
    "RegistrySnapshot",
]
