"""
CinePick movie discovery application package.

This package contains the recommendation core, database layer, HTTP API,
external metadata client, Streamlit UI and shared utilities.
"""

__version__ = "1.0.0"
