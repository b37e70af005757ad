from flask import Blueprint, current_app, jsonify
from qc_service.extensions import db

health_bp = Blueprint('health', __name__)


@health_bp.route('/health', methods=['GET'])
def health_check():
    db_status = 'connected'
    try:
        db.session.execute(db.text('SELECT 1'))
    except Exception as e:
        db.session.rollback()
        current_app.logger.warning(f'[Health] Database probe failed: {e}')
        db_status = 'disconnected'
    return jsonify({
        'status': 'ok',
        'database': db_status,
        'version': current_app.config['APP_VERSION'],
        'environment': current_app.config['ENV_NAME'],
    })
