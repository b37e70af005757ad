import os
from flask import Flask
from dotenv import load_dotenv

from qc_service.config import config
from qc_service.extensions import db, ma, cors, limiter


def create_app(config_name=None):
    """Build the QC check service. ``config_name`` defaults to $FLASK_ENV."""
    load_dotenv()

    if config_name is None:
        config_name = os.environ.get('FLASK_ENV', 'development')

    app = Flask(__name__)
    app.config.from_object(config.get(config_name, config['default']))
    app.config['ENV_NAME'] = config_name

    db.init_app(app)
    ma.init_app(app)
    cors.init_app(app, origins=app.config['CORS_ORIGINS'],
                  allow_headers=app.config['CORS_ALLOW_HEADERS'],
                  methods=app.config['CORS_METHODS'])
    limiter.init_app(app)

    from qc_service.utils.logging_config import configure_logging
    from qc_service.middleware.error_handler import register_error_handlers
    from qc_service.middleware.security_headers import register_security_headers
    configure_logging(app)
    register_error_handlers(app)
    register_security_headers(app)

    from qc_service.routes.health_routes import health_bp
    from qc_service.routes.qc_check_routes import qc_checks_bp
    prefix = app.config['API_PREFIX']
    app.register_blueprint(health_bp, url_prefix=prefix)
    app.register_blueprint(qc_checks_bp, url_prefix=prefix)

    app.logger.info(f'QC check service started ({config_name}), routes under {prefix}')
    return app
