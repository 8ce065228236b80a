"""In-memory movie catalog loaded once from the bundled JSON data file"""
import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from catalog.models import Movie

logger = logging.getLogger(__name__)

DEFAULT_DATA_PATH = Path(__file__).resolve().parent / 'data' / 'movies.json'


@dataclass(frozen=True)
class LoadResult:
    movies: tuple = ()
    error: Optional[str] = None

    @property
    def ok(self):
        return self.error is None


def load_movies(path):
    """
    Read and parse a movies data file

    Returns:
        LoadResult: parsed movies, or an empty result carrying the error
    """
    try:
        with open(path, 'r', encoding='utf-8') as f:
            raw = json.load(f)
    except OSError as e:
        return LoadResult(error=f"Cannot read {path}: {e}")
    except (ValueError, RecursionError) as e:
        return LoadResult(error=f"Invalid JSON in {path}: {e}")

    if not isinstance(raw, list):
        return LoadResult(error=f"Expected a JSON array in {path}, got {type(raw).__name__}")

    movies = []
    seen_ids = set()
    for position, record in enumerate(raw):
        try:
            movie = Movie.from_record(record)
        except KeyError as e:
            return LoadResult(error=f"Record {position} is missing field {e}")
        except (TypeError, ValueError) as e:
            return LoadResult(error=f"Record {position} is malformed: {e}")

        if movie.id in seen_ids:
            return LoadResult(error=f"Record {position} repeats movie id {movie.id}")
        seen_ids.add(movie.id)
        movies.append(movie)

    return LoadResult(movies=tuple(movies))


class CatalogStore:
    def __init__(self, data_path=None):
        self.data_path = Path(data_path) if data_path else DEFAULT_DATA_PATH
        self.load_result = LoadResult()
        self._movies = ()
        self._by_id = {}
        self._load()

    def _load(self):
        result = load_movies(self.data_path)
        if not result.ok:
            logger.error(f"Failed to load movies, the treasure chest stays empty: {result.error}")

        self.load_result = result
        self._movies = result.movies
        self._by_id = {movie.id: movie for movie in result.movies}
        logger.info(f"Loaded {len(self._movies)} movies from {self.data_path}")

    def get_all(self):
        return list(self._movies)

    def get_by_id(self, movie_id):
        if movie_id is None or movie_id <= 0:
            return None
        return self._by_id.get(movie_id)

    def __len__(self):
        return len(self._movies)
