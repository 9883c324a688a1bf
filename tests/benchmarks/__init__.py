"""Benchmarks package — uses pytest-benchmark.

Not part of the default run; point pytest at the directory::

    pytest tests/benchmarks/ -v --benchmark-sort=median

To run as plain functional tests without benchmark overhead::

    pytest tests/benchmarks/ --benchmark-disable
"""
