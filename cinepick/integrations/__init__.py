"""
Clients for third-party services.
"""

from cinepick.integrations.tmdb import TMDBClient, format_movie, format_movie_details

__all__ = ['TMDBClient', 'format_movie', 'format_movie_details']
