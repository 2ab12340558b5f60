"""
Catalog import from CSV.

Expected columns: ``id``, ``title``, ``genres`` (pipe-separated, e.g.
``Adventure|Action``), ``rating``; optional ``image_url`` and
``description``.
"""

import logging
from pathlib import Path
from typing import List, Union

import pandas as pd

from cinepick.core.recommendations.catalog import Movie

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = {'id', 'title', 'genres', 'rating'}
GENRE_SEPARATOR = '|'


def load_catalog_csv(path: Union[str, Path]) -> List[Movie]:
    """
    Read a catalog CSV into Movie records.

    Args:
        path: CSV file path

    Returns:
        List of Movie records in file order

    Raises:
        ValueError: If required columns are missing, IDs repeat, or a row
            has no genres or an out-of-range rating
    """
    df = pd.read_csv(path)
    missing = REQUIRED_COLUMNS - set(df.columns)
    if missing:
        raise ValueError(f"Catalog CSV missing columns: {sorted(missing)}")

    if df['id'].duplicated().any():
        dupes = sorted(df.loc[df['id'].duplicated(), 'id'].unique().tolist())
        raise ValueError(f"Duplicate movie IDs in catalog: {dupes}")

    for column in ('image_url', 'description'):
        if column not in df.columns:
            df[column] = ''
    df = df.fillna({'genres': '', 'image_url': '', 'description': ''})

    movies = []
    for row in df.itertuples(index=False):
        genres = tuple(g.strip() for g in str(row.genres).split(GENRE_SEPARATOR) if g.strip())
        movies.append(Movie(
            id=int(row.id),
            title=str(row.title),
            genres=genres,
            rating=float(row.rating),
            image_url=str(row.image_url),
            description=str(row.description),
        ))

    logger.info(f"Loaded {len(movies)} movies from {path}")
    return movies
