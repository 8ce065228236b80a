"""Criteria validation and filtering over the movie catalog"""
import logging

logger = logging.getLogger(__name__)

MAX_NAME_LENGTH = 100
MAX_GENRE_LENGTH = 50

INVALID_ID_MESSAGE = "Arrr! That movie ID be as worthless as fool's gold - must be a positive number, matey!"
NAME_TOO_LONG_MESSAGE = (
    "Blimey! That movie name be longer than a kraken's tentacle - "
    f"keep it under {MAX_NAME_LENGTH} characters, ye scallywag!"
)
GENRE_TOO_LONG_MESSAGE = (
    "Batten down the hatches! That genre be too long - "
    f"keep it under {MAX_GENRE_LENGTH} characters, me hearty!"
)


def is_blank(value):
    return value is None or not value.strip()


class MovieSearch:
    def __init__(self, store):
        self.store = store

    def validate(self, name=None, movie_id=None, genre=None):
        """
        Check search criteria

        Returns:
            list: error messages in id, name, genre order; empty when valid
        """
        errors = []

        if movie_id is not None and movie_id <= 0:
            errors.append(INVALID_ID_MESSAGE)

        if name is not None and len(name.strip()) > MAX_NAME_LENGTH:
            errors.append(NAME_TOO_LONG_MESSAGE)

        if genre is not None and len(genre.strip()) > MAX_GENRE_LENGTH:
            errors.append(GENRE_TOO_LONG_MESSAGE)

        return errors

    def search(self, name=None, movie_id=None, genre=None):
        """
        Filter the catalog by every supplied criterion

        Name and genre match case-insensitively anywhere in the field,
        the id must match exactly. With no criteria the whole catalog
        comes back, in load order.
        """
        logger.info(f"Ahoy! Searching the treasure chest - name: '{name}', id: {movie_id}, genre: '{genre}'")

        movies = self.store.get_all()

        if is_blank(name) and movie_id is None and is_blank(genre):
            logger.info("Arrr! No search criteria provided, returning the whole treasure chest")
            return movies

        name_needle = None if is_blank(name) else name.strip().lower()
        genre_needle = None if is_blank(genre) else genre.strip().lower()

        results = [
            movie for movie in movies
            if (name_needle is None or name_needle in movie.name.lower())
            and (movie_id is None or movie.id == movie_id)
            and (genre_needle is None or genre_needle in movie.genre.lower())
        ]

        logger.info(f"Shiver me timbers! Found {len(results)} movies matching the search criteria")
        return results
