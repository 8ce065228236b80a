from flask import Flask, jsonify, request
from config import Config
import logging

from catalog.store import CatalogStore
from catalog.search import MovieSearch, INVALID_ID_MESSAGE

from metrics import (
    metrics_endpoint, track_request,
    CATALOG_SIZE, SEARCH_QUERY_COUNT, SEARCH_RESULTS_COUNT,
    VALIDATION_FAILURE_COUNT, MOVIE_VIEWS
)

logging.basicConfig(
    level=Config.LOG_LEVEL,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


NO_RESULTS_MESSAGE = (
    "Shiver me timbers! No movies found matching yer search criteria, matey. "
    "Try adjusting yer search or browse all our treasures below!"
)
ONE_RESULT_MESSAGE = "Arrr! Found 1 movie treasure matching yer search, ye savvy sailor!"
MANY_RESULTS_MESSAGE = "Ahoy! Discovered {count} movie treasures matching yer search criteria, me hearty!"


def result_message(count):
    if count == 0:
        return NO_RESULTS_MESSAGE
    if count == 1:
        return ONE_RESULT_MESSAGE
    return MANY_RESULTS_MESSAGE.format(count=count)


def parse_movie_id(raw_id):
    """
    Turn the 'id' query parameter into an int

    Returns:
        tuple: (movie_id, valid) - a blank parameter is (None, True)
    """
    if raw_id is None or not raw_id.strip():
        return None, True
    try:
        return int(raw_id.strip()), True
    except ValueError:
        return None, False


def create_app(store=None, search=None):
    if store is None:
        store = CatalogStore(Config.MOVIES_DATA_PATH)
    if search is None:
        search = MovieSearch(store)

    app = Flask(__name__)
    app.config.from_object(Config)

    CATALOG_SIZE.set(len(store))


    @app.route('/health')
    @track_request
    def health():
        return jsonify({
            'status': 'healthy' if store.load_result.ok else 'degraded',
            'service': 'movie-catalog',
            'movies': len(store)
        }), 200


    @app.route('/api/movies')
    @track_request
    def movies_list():
        logger.info("Fetching movies")
        movies = store.get_all()
        return jsonify({
            'movies': [movie.to_dict() for movie in movies],
            'count': len(movies)
        }), 200


    @app.route('/api/movies/<int:movie_id>')
    @track_request
    def movie_detail(movie_id):
        logger.info(f"Fetching details for movie ID: {movie_id}")

        movie = store.get_by_id(movie_id)
        if not movie:
            logger.warning(f"Movie with ID {movie_id} not found")
            return jsonify({'error': f'Movie with ID {movie_id} was not found.'}), 404

        MOVIE_VIEWS.labels(movie_id=movie_id).inc()
        return jsonify(movie.to_dict()), 200


    @app.route('/api/movies/search')
    @track_request
    def movies_search():
        name = request.args.get('name')
        genre = request.args.get('genre')
        movie_id, id_valid = parse_movie_id(request.args.get('id'))

        logger.info(f"Ahoy! Received search request - name: '{name}', id: {movie_id}, genre: '{genre}'")
        SEARCH_QUERY_COUNT.inc()

        errors = search.validate(name, movie_id, genre)
        if not id_valid:
            errors.insert(0, INVALID_ID_MESSAGE)

        if errors:
            logger.warning(f"Arrr! Search parameters failed validation: {errors}")
            VALIDATION_FAILURE_COUNT.inc()
            return jsonify({
                'errors': errors,
                'message': ' '.join(errors),
                'movies': [movie.to_dict() for movie in store.get_all()]
            }), 400

        results = search.search(name, movie_id, genre)
        SEARCH_RESULTS_COUNT.observe(len(results))

        if results:
            logger.info(f"Yo ho ho! Found {len(results)} movies matching the search")
        else:
            logger.info("Blimey! No movies found matching the search criteria")

        return jsonify({
            'movies': [movie.to_dict() for movie in results],
            'count': len(results),
            'criteria': {'name': name, 'id': movie_id, 'genre': genre},
            'message': result_message(len(results))
        }), 200


    @app.route('/metrics')
    def metrics():
        return metrics_endpoint()

    return app


app = create_app()


if __name__ == '__main__':
    app.run(
        host=Config.FLASK_HOST,
        port=Config.FLASK_PORT,
        debug=Config.FLASK_DEBUG
    )
