import traceback
from flask import current_app
from qc_service.extensions import db
from qc_service.utils.exceptions import QCServiceError
from qc_service.utils.responses import error_response


def register_error_handlers(app):

    @app.errorhandler(QCServiceError)
    def qc_service_error(e):
        log = current_app.logger.error if e.status_code >= 500 else current_app.logger.warning
        log(f'{type(e).__name__}: {e.message} ({e.error})')
        return error_response(e.message, e.status_code, error=e.error)

    @app.errorhandler(400)
    def bad_request(e):
        return error_response(str(e.description) if hasattr(e, 'description') else 'Bad request', 400,
                              error='Bad request')

    @app.errorhandler(404)
    def not_found(e):
        return error_response('Resource not found', 404, error='Not found')

    @app.errorhandler(405)
    def method_not_allowed(e):
        return error_response('Method not allowed', 405, error='Method not allowed')

    @app.errorhandler(413)
    def too_large(e):
        return error_response('Request entity too large. Max 5MB.', 413, error='Payload too large')

    @app.errorhandler(429)
    def rate_limited(e):
        return error_response('Rate limit exceeded. Please slow down.', 429, error=str(e.description))

    @app.errorhandler(500)
    def internal_error(e):
        current_app.logger.error(f'500 Error: {str(e)}\n{traceback.format_exc()}')
        return error_response('Something went wrong', 500, error=str(e))

    @app.errorhandler(Exception)
    def unhandled_exception(e):
        db.session.rollback()
        current_app.logger.error(f'Unhandled Exception: {str(e)}\n{traceback.format_exc()}')
        return error_response('Something went wrong', 500, error=f'{type(e).__name__}: {str(e)}')
