"""Measurement and reporting subsystem for idiombench.

Provides tools for timing named workloads a fixed number of times,
collecting the durations into suites, ranking them, and expressing
each case as a ratio of a suite baseline.
"""
