"""Book model."""
from dataclasses import dataclass, field
from enum import Enum as PyEnum

MIN_YEAR = 1940
MAX_YEAR = 2100


class GenreTag(str, PyEnum):
    """Genre catalog enum."""
    SCI_FI = "SCI_FI"
    NOVEL = "NOVEL"
    HISTORY = "HISTORY"
    MANGA = "MANGA"
    ROMANCE = "ROMANCE"
    PROFESSIONAL = "PROFESSIONAL"

    @classmethod
    def is_valid(cls, value: str) -> bool:
        return value in cls._value2member_map_


@dataclass
class Book:
    """Book record held by the in-memory store."""

    id: int
    title: str
    author: str
    year: int
    price: float
    genres: list[GenreTag] = field(default_factory=list)

    @property
    def title_key(self) -> str:
        """Case-insensitive identity of the title."""
        return self.title.casefold()

    def has_any_genre(self, genres: list[GenreTag]) -> bool:
        return any(genre in self.genres for genre in genres)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "title": self.title,
            "author": self.author,
            "price": self.price,
            "year": self.year,
            "genres": [genre.value for genre in self.genres],
        }
