"""
Regression backends.

Available backends:
    CPUNormalEquationsBackend: CPU reference implementation (closed-form normal equations)
"""

from pynumerics.regression.backends.cpu import CPUNormalEquationsBackend

__all__ = [
    "CPUNormalEquationsBackend",
]
