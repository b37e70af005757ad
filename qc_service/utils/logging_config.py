import os
import logging
from logging.handlers import RotatingFileHandler


def configure_logging(app):
    """Attach a rotating file handler to app.logger once per log file."""
    log_level = getattr(logging, app.config['LOG_LEVEL'].upper(), logging.DEBUG)
    log_file = os.path.abspath(app.config['LOG_FILE'])
    os.makedirs(os.path.dirname(log_file), exist_ok=True)
    app.logger.setLevel(log_level)

    # app.logger is shared by every app built in this process
    if any(isinstance(h, RotatingFileHandler) and h.baseFilename == log_file
           for h in app.logger.handlers):
        return

    handler = RotatingFileHandler(log_file, maxBytes=app.config['LOG_MAX_BYTES'],
                                  backupCount=app.config['LOG_BACKUP_COUNT'])
    handler.setLevel(log_level)
    handler.setFormatter(logging.Formatter(app.config['LOG_FORMAT']))
    app.logger.addHandler(handler)
