from contextlib import contextmanager
from flask import current_app
from qc_service.extensions import db
from qc_service.utils.exceptions import QCServiceError, PersistenceError


@contextmanager
def atomic(failure_message):
    """Run the enclosed block as one transaction on the request's session.

    Commits when the block exits cleanly. On any exception the session is
    rolled back exactly once; service errors (e.g. NotFoundError) are
    re-raised as-is, anything else surfaces as PersistenceError carrying the
    underlying message. The pooled connection itself is returned when
    Flask-SQLAlchemy removes the session at app-context teardown.
    """
    try:
        yield db.session
        db.session.commit()
    except QCServiceError:
        db.session.rollback()
        raise
    except Exception as e:
        db.session.rollback()
        current_app.logger.error(f'Transaction rolled back: {e}')
        raise PersistenceError(failure_message, str(e)) from e
