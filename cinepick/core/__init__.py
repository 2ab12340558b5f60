"""
Core recommendation logic.

Pure scoring and selection functions live in ``cinepick.core.recommendations``;
they take plain data and never touch the database or the network.
"""
