from prometheus_client import Counter, Histogram, Gauge, generate_latest, CONTENT_TYPE_LATEST
from flask import Response, request
import time
import functools


REQUEST_COUNT = Counter(
    'catalog_request_count',
    'Total Request Count',
    ['method', 'endpoint', 'http_status']
)

REQUEST_DURATION = Histogram(
    'catalog_request_duration_seconds',
    'Request Duration',
    ['method', 'endpoint']
)


CATALOG_SIZE = Gauge(
    'catalog_movies',
    'Number of movies loaded into the catalog'
)


SEARCH_QUERY_COUNT = Counter(
    'catalog_search_queries_total',
    'Total search queries'
)

SEARCH_RESULTS_COUNT = Histogram(
    'catalog_search_results',
    'Number of search results returned'
)

VALIDATION_FAILURE_COUNT = Counter(
    'catalog_search_validation_failures_total',
    'Total searches rejected by criteria validation'
)


MOVIE_VIEWS = Counter(
    'catalog_movie_views_total',
    'Total movie detail views',
    ['movie_id']
)


def track_request(f):
    @functools.wraps(f)
    def wrapper(*args, **kwargs):
        start_time = time.time()
        
        try:
            response = f(*args, **kwargs)
            if isinstance(response, tuple):
                status_code = response[1]
            else:
                status_code = getattr(response, 'status_code', 200)
            
            REQUEST_COUNT.labels(
                method=request.method,
                endpoint=f.__name__,
                http_status=status_code
            ).inc()
            
            duration = time.time() - start_time
            REQUEST_DURATION.labels(
                method=request.method,
                endpoint=f.__name__
            ).observe(duration)
            
            return response
            
        except Exception:
            REQUEST_COUNT.labels(
                method=request.method,
                endpoint=f.__name__,
                http_status=500
            ).inc()
            raise
    
    return wrapper


def metrics_endpoint():
    return Response(generate_latest(), mimetype=CONTENT_TYPE_LATEST)
