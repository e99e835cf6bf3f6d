"""
Error metrics backends.

Available backends:
    CPUErrorBackend: CPU reference implementation
"""

from pynumerics.metrics.backends.cpu import CPUErrorBackend

__all__ = [
    "CPUErrorBackend",
]
