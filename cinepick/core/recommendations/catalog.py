"""
Plain data records consumed by the recommendation scorer.

The scorer never sees ORM rows; callers convert them into ``Movie`` records
first (see ``movie_from_record``).
"""

import json
from dataclasses import dataclass, field
from typing import Any, Iterable, List, Tuple


@dataclass(frozen=True)
class Movie:
    """
    Immutable catalog entry.

    Attributes:
        id: Unique movie ID within the catalog
        title: Display title
        genres: Genre labels (at least one)
        rating: Catalog/critic rating in [0, 5]
        image_url: Poster URL (display only)
        description: Short synopsis (display only)
    """
    id: int
    title: str
    genres: Tuple[str, ...]
    rating: float
    image_url: str = ""
    description: str = ""

    def __post_init__(self):
        # Accept any iterable of labels but store a tuple so the record stays hashable
        object.__setattr__(self, "genres", tuple(self.genres))
        if not self.genres:
            raise ValueError(f"Movie {self.id} must have at least one genre")
        if not (0.0 <= self.rating <= 5.0):
            raise ValueError(f"Movie {self.id} rating must be between 0 and 5")


@dataclass(frozen=True)
class ScoredMovie:
    """A movie paired with the score it received in one scoring call."""
    movie: Movie
    score: float = field(default=0.0)


def movie_from_record(record: Any) -> Movie:
    """
    Build a ``Movie`` from a database row.

    Args:
        record: ORM Movie object (genres stored as JSON array text)

    Returns:
        Movie record suitable for the scorer
    """
    genres = record.genres
    if isinstance(genres, str):
        genres = json.loads(genres)
    return Movie(
        id=record.movie_id,
        title=record.title,
        genres=tuple(genres),
        rating=float(record.rating),
        image_url=record.image_url or "",
        description=record.description or "",
    )


def movies_from_records(records: Iterable[Any]) -> List[Movie]:
    """Convert a sequence of ORM rows, preserving order."""
    return [movie_from_record(r) for r in records]


DEFAULT_CATALOG: Tuple[Movie, ...] = (
    Movie(
        id=1,
        title="The Adventure Begins",
        genres=("Adventure", "Action"),
        rating=4.5,
        image_url="https://images.unsplash.com/photo-1536440136628-849c177e76a1?auto=format&fit=crop&q=80",
        description="An epic adventure that takes you through uncharted territories.",
    ),
    Movie(
        id=2,
        title="Mystery of the Night",
        genres=("Mystery", "Thriller"),
        rating=4.2,
        image_url="https://images.unsplash.com/photo-1535016120720-40c646be5580?auto=format&fit=crop&q=80",
        description="A thrilling mystery that keeps you guessing until the end.",
    ),
    Movie(
        id=3,
        title="Love in Paris",
        genres=("Romance", "Drama"),
        rating=4.0,
        image_url="https://images.unsplash.com/photo-1502602898657-3e91760cbb34?auto=format&fit=crop&q=80",
        description="A romantic tale set in the heart of Paris.",
    ),
    Movie(
        id=4,
        title="Space Odyssey",
        genres=("Sci-Fi", "Adventure"),
        rating=4.7,
        image_url="https://images.unsplash.com/photo-1446776811953-b23d57bd21aa?auto=format&fit=crop&q=80",
        description="An interstellar journey beyond imagination.",
    ),
    Movie(
        id=5,
        title="Comedy Hour",
        genres=("Comedy",),
        rating=3.8,
        image_url="https://images.unsplash.com/photo-1517604931442-7e0c8ed2963c?auto=format&fit=crop&q=80",
        description="A hilarious comedy that will keep you laughing.",
    ),
)
