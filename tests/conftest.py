import json
import os
import sys

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from catalog.store import CatalogStore


TWO_MOVIES = [
    {
        'id': 1,
        'movieName': 'The Prison Escape',
        'director': 'John Director',
        'year': 1994,
        'genre': 'Drama',
        'description': 'Two imprisoned men bond over a number of years.',
        'duration': 142,
        'imdbRating': 5.0
    },
    {
        'id': 2,
        'movieName': 'The Family Boss',
        'director': 'Michael Filmmaker',
        'year': 1972,
        'genre': 'Crime/Drama',
        'description': 'The aging patriarch of a crime dynasty hands over control.',
        'duration': 175,
        'imdbRating': 5.0
    },
]


@pytest.fixture
def write_catalog(tmp_path):
    def _write(content, name='movies.json'):
        path = tmp_path / name
        if isinstance(content, str):
            path.write_text(content, encoding='utf-8')
        else:
            path.write_text(json.dumps(content), encoding='utf-8')
        return path
    return _write


@pytest.fixture
def two_movie_store(write_catalog):
    return CatalogStore(write_catalog(TWO_MOVIES))


@pytest.fixture
def bundled_store():
    return CatalogStore()
