from dataclasses import dataclass


@dataclass(frozen=True)
class Movie:
    id: int
    name: str
    director: str
    year: int
    genre: str
    description: str
    duration_minutes: int
    rating: float

    @classmethod
    def from_record(cls, record):
        """
        Build a Movie from one entry of the movies data file

        Raises KeyError for a missing field, TypeError/ValueError for a
        value that cannot be used.
        """
        if not isinstance(record, dict):
            raise TypeError(f"Movie record must be an object, got {type(record).__name__}")

        movie_id = _as_int(record['id'], 'id')
        if movie_id <= 0:
            raise ValueError(f"Movie id must be positive, got {movie_id}")

        name = _as_str(record['movieName'], 'movieName')
        if not name.strip():
            raise ValueError(f"Movie {movie_id} has a blank name")

        return cls(
            id=movie_id,
            name=name,
            director=_as_str(record['director'], 'director'),
            year=_as_int(record['year'], 'year'),
            genre=_as_str(record['genre'], 'genre'),
            description=_as_str(record['description'], 'description'),
            duration_minutes=_as_int(record['duration'], 'duration'),
            rating=_as_float(record['imdbRating'], 'imdbRating'),
        )

    def to_dict(self):
        return {
            'id': self.id,
            'movieName': self.name,
            'director': self.director,
            'year': self.year,
            'genre': self.genre,
            'description': self.description,
            'duration': self.duration_minutes,
            'imdbRating': self.rating,
        }


def _as_int(value, field):
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, bool) or not isinstance(value, (int, str)):
        raise TypeError(f"Field '{field}' must be an integer")
    return int(value)


def _as_float(value, field):
    if isinstance(value, bool) or not isinstance(value, (int, float, str)):
        raise TypeError(f"Field '{field}' must be a number")
    return float(value)


def _as_str(value, field):
    if not isinstance(value, str):
        raise TypeError(f"Field '{field}' must be a string")
    return value
