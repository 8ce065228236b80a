#!/usr/bin/env python3
import os
import sys

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from config import Config
from catalog.store import load_movies


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    path = argv[0] if argv else Config.MOVIES_DATA_PATH

    result = load_movies(path)
    if not result.ok:
        print(f"Catalog check failed: {result.error}")
        return 1

    print(f"Catalog OK: {len(result.movies)} movies in {path}")
    for movie in result.movies:
        print(f"  [{movie.id}] {movie.name} ({movie.year}) - {movie.genre}, {movie.rating}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
