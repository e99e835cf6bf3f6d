"""
Descriptive statistics backends.

Available backends:
    CPUDescriptiveBackend: CPU reference implementation (two-pass moments)
"""

from pynumerics.descriptive.backends.cpu import CPUDescriptiveBackend

__all__ = [
    "CPUDescriptiveBackend",
]
