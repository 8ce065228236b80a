import os

from dotenv import load_dotenv

load_dotenv()

BASE_DIR = os.path.dirname(os.path.abspath(__file__))


class Config:
    FLASK_HOST = os.getenv('FLASK_HOST', '0.0.0.0')
    FLASK_PORT = int(os.getenv('FLASK_PORT', '5000'))
    FLASK_DEBUG = os.getenv('FLASK_DEBUG', 'False').lower() == 'true'


    MOVIES_DATA_PATH = os.getenv(
        'MOVIES_DATA_PATH',
        os.path.join(BASE_DIR, 'catalog', 'data', 'movies.json')
    )


    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO').upper()
