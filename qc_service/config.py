import os


def _env(name, default):
    return os.environ.get(name, default)


def _database_url(url_var='DATABASE_URL'):
    """Full URL from ``url_var`` if set, otherwise assembled from the DB_* parts."""
    url = os.environ.get(url_var)
    if url:
        return url
    return 'postgresql://{user}:{password}@{host}:{port}/{name}'.format(
        user=_env('DB_USER', 'postgres'),
        password=_env('DB_PASSWORD', 'postgres'),
        host=_env('DB_HOST', 'localhost'),
        port=_env('DB_PORT', '5432'),
        name=_env('DB_NAME', 'qc_checks'),
    )


def _engine_options(database_url, **pool):
    """Pool settings for PostgreSQL; other drivers (SQLite in tests) get none."""
    if not database_url.startswith('postgresql'):
        return {}
    options = {
        'pool_pre_ping': True,
        'pool_recycle': 300,
        'connect_args': {
            'connect_timeout': 10,
            # qc_checks and employees may live in a non-public schema
            'options': f'-csearch_path={_env("DB_SCHEMA", "public")},public',
        },
    }
    options.update({k: v for k, v in pool.items() if v})
    return options


class BaseConfig:
    APP_VERSION = '1.0.0'
    API_PREFIX = _env('API_PREFIX', '/api/v1')
    SECRET_KEY = _env('SECRET_KEY', 'dev-secret')
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    MAX_CONTENT_LENGTH = 5 * 1024 * 1024

    CORS_ORIGINS = _env('CORS_ORIGINS', 'http://localhost:5173,http://localhost:3000').split(',')
    CORS_ALLOW_HEADERS = ['Content-Type', 'Authorization']
    CORS_METHODS = ['GET', 'POST', 'PUT', 'DELETE', 'OPTIONS']
    SECURITY_HEADERS = {
        'X-Content-Type-Options': 'nosniff',
        'X-Frame-Options': 'DENY',
        'Strict-Transport-Security': 'max-age=31536000',
        'Cache-Control': 'no-store',
    }

    LOG_LEVEL = _env('LOG_LEVEL', 'DEBUG')
    LOG_FILE = _env('LOG_FILE', './logs/qc_checks.log')
    LOG_FORMAT = '[%(asctime)s] %(levelname)s in %(module)s: %(message)s'
    LOG_MAX_BYTES = 10_000_000
    LOG_BACKUP_COUNT = 5

    RATELIMIT_DEFAULT = _env('RATELIMIT_DEFAULT', '100/minute')
    RATELIMIT_STORAGE_URI = 'memory://'


class DevelopmentConfig(BaseConfig):
    DEBUG = True
    SQLALCHEMY_DATABASE_URI = _database_url()
    SQLALCHEMY_ENGINE_OPTIONS = _engine_options(SQLALCHEMY_DATABASE_URI)


class StagingConfig(BaseConfig):
    DEBUG = True
    SQLALCHEMY_DATABASE_URI = _database_url()
    SQLALCHEMY_ENGINE_OPTIONS = _engine_options(SQLALCHEMY_DATABASE_URI, pool_size=5, max_overflow=10)


class ProductionConfig(BaseConfig):
    """Redis-backed rate limits, larger pool, INFO logging."""
    DEBUG = False
    LOG_LEVEL = _env('LOG_LEVEL', 'INFO')
    RATELIMIT_STORAGE_URI = _env('REDIS_URL', 'memory://')
    SQLALCHEMY_DATABASE_URI = _database_url()
    SQLALCHEMY_ENGINE_OPTIONS = _engine_options(SQLALCHEMY_DATABASE_URI, pool_size=10, max_overflow=20)


class TestingConfig(BaseConfig):
    """In-memory SQLite unless TEST_DATABASE_URL points elsewhere."""
    TESTING = True
    RATELIMIT_ENABLED = False
    LOG_FILE = _env('TEST_LOG_FILE', './logs/test.log')
    SQLALCHEMY_DATABASE_URI = _env('TEST_DATABASE_URL', 'sqlite://')
    SQLALCHEMY_ENGINE_OPTIONS = _engine_options(SQLALCHEMY_DATABASE_URI)


config = {
    'development': DevelopmentConfig,
    'staging': StagingConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig,
}
