"""Benchmark helpers.

The subpackage contains pyperf scripts that time the kernels against the
corresponding NumPy functions.
"""
