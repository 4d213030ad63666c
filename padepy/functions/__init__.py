"""Low-level Padé kernels.

This subpackage contains the coefficient sets, the kernel bodies and their
NumPy, Numba CPU and Numba CUDA renditions used by :mod:`padepy.approx`.
"""
