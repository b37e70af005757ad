from flask import Blueprint, request, current_app
from marshmallow import ValidationError as SchemaValidationError
from qc_service.schemas.qc_checks_schema import (QCCheckCreateSchema, QCCheckPatchSchema,
                                                 QCCheckFilterSchema)
from qc_service.services.qc_check_service import (create_qc_check, list_qc_checks, get_qc_check,
                                                  delete_qc_check, update_qc_check)
from qc_service.utils.exceptions import ValidationError
from qc_service.utils.responses import success_response, format_validation_errors

qc_checks_bp = Blueprint('qc_checks', __name__)
create_schema = QCCheckCreateSchema()
patch_schema = QCCheckPatchSchema()
filter_schema = QCCheckFilterSchema()


def _load(schema, payload, message):
    try:
        return schema.load(payload)
    except SchemaValidationError as e:
        raise ValidationError(message, format_validation_errors(e.messages)) from e


@qc_checks_bp.route('/qc-checks', methods=['POST'])
def create_check():
    body = request.get_json(silent=True) or {}
    current_app.logger.info(f'[POST QC Check] Received data: {body}')
    data = _load(create_schema, body,
                 'Missing required fields: part_code and production_date are required')
    created = create_qc_check(data)
    current_app.logger.info(f'[POST QC Check] Successfully created: {created["id"]}')
    return success_response(data=created, message='QC Check created successfully', status_code=201)


@qc_checks_bp.route('/qc-checks', methods=['GET'])
def get_checks():
    current_app.logger.info(f'[GET QC Checks] Query params: {request.args.to_dict()}')
    params = _load(filter_schema, request.args.to_dict(), 'Invalid query parameters')
    items = list_qc_checks(params)
    current_app.logger.info(f'[GET QC Checks] Found {len(items)} records')
    return success_response(data=items, total=len(items))


@qc_checks_bp.route('/qc-checks/<int:id>', methods=['GET'])
def get_check(id):
    return success_response(data=get_qc_check(id))


@qc_checks_bp.route('/qc-checks/<int:id>', methods=['PUT'])
def update_check(id):
    body = request.get_json(silent=True) or {}
    current_app.logger.info(f'[PUT QC Check] Updating ID: {id} {body}')
    patch = _load(patch_schema, body, 'Invalid QC check data')
    updated = update_qc_check(id, patch)
    current_app.logger.info(f'[PUT QC Check] Successfully updated ID: {id}')
    return success_response(data=updated, message='QC Check updated successfully')


@qc_checks_bp.route('/qc-checks/<int:id>', methods=['DELETE'])
def delete_check(id):
    current_app.logger.info(f'[DELETE QC Check] Deleting ID: {id}')
    deleted_id = delete_qc_check(id)
    current_app.logger.info(f'[DELETE QC Check] Successfully deleted ID: {id}')
    return success_response(data={'deletedId': deleted_id}, message='QC Check deleted successfully')
