"""QC check record store: approver lookup, transactional writes and filtered reads."""
from flask import current_app
from sqlalchemy.exc import SQLAlchemyError
from qc_service.extensions import db
from qc_service.models.employees import Employee
from qc_service.models.qc_checks import QCCheck, utc_now
from qc_service.utils.exceptions import NotFoundError, PersistenceError
from qc_service.utils.transaction import atomic

UNKNOWN_APPROVER = 'Unknown'


def resolve_employee_id(emp_name):
    """Case-insensitive exact match on employees.emp_name.

    Returns None without querying when no name is given, and None when
    nobody matches. With duplicate names the first row found wins.
    """
    if not emp_name:
        return None
    emp = Employee.query.filter(db.func.lower(Employee.emp_name) == emp_name.lower()).first()
    if emp is None:
        current_app.logger.info(f'[Approver] No employee matches "{emp_name}"')
        return None
    return emp.id


def approver_display(approved_by_name, emp_name):
    return approved_by_name or emp_name or UNKNOWN_APPROVER


class QCCheckFilter:
    """Accumulates optional predicates for the list query.

    Each predicate is a SQLAlchemy expression carrying its own bound
    parameter; request values are never spliced into SQL text.
    """

    def __init__(self):
        self.predicates = [QCCheck.is_active.is_(True)]

    def add(self, predicate):
        self.predicates.append(predicate)
        return self

    @classmethod
    def from_params(cls, params):
        f = cls()
        if params.get('status'):
            f.add(QCCheck.status == params['status'])
        if params.get('date_from'):
            f.add(QCCheck.production_date >= params['date_from'])
        if params.get('date_to'):
            f.add(QCCheck.production_date <= params['date_to'])
        if params.get('part_code'):
            f.add(QCCheck.part_code.ilike(f'%{params["part_code"]}%'))
        if params.get('data_from'):
            f.add(QCCheck.data_from == params['data_from'])
        return f

    def clause(self):
        return db.and_(*self.predicates)


def serialize_qc_check(c):
    return {
        'id': c.id,
        'part_code': c.part_code,
        'part_name': c.part_name,
        'vendor_name': c.vendor_name,
        'vendor_id': c.vendor_id,
        'vendor_type': c.vendor_type,
        'production_date': c.production_date.isoformat() if c.production_date else None,
        'approved_by': c.approved_by,
        'approved_by_name': c.approved_by_name,
        'approved_at': c.approved_at.isoformat() if c.approved_at else None,
        'data_from': c.data_from,
        'status': c.status,
        'remark': c.remark,
        'created_at': c.created_at.isoformat() if c.created_at else None,
        'updated_at': c.updated_at.isoformat() if c.updated_at else None,
    }


def _serialize_for_display(c, emp_name):
    result = serialize_qc_check(c)
    result['approved_by_emp_name'] = emp_name
    result['approved_by'] = approver_display(c.approved_by_name, emp_name)
    return result


def _with_approver_name():
    return (db.session.query(QCCheck, Employee.emp_name)
            .outerjoin(Employee, Employee.id == QCCheck.approved_by))


def create_qc_check(data):
    """Insert one record. ``data`` is the loaded QCCheckCreateSchema payload."""
    with atomic('Failed to create QC check'):
        now = utc_now()
        qc = QCCheck(
            part_code=data['part_code'],
            part_name=data.get('part_name'),
            vendor_name=data.get('vendor_name'),
            vendor_id=data.get('vendor_id'),
            vendor_type=data.get('vendor_type'),
            production_date=data['production_date'],
            approved_by=resolve_employee_id(data.get('approved_by')),
            approved_by_name=data.get('approved_by'),
            approved_at=now,
            data_from=data.get('data_from') or 'Create',
            status='Complete',
            created_at=now,
            updated_at=now,
            is_active=True,
        )
        db.session.add(qc)
        db.session.flush()
        result = serialize_qc_check(qc)
    return result


def list_qc_checks(params):
    try:
        rows = (_with_approver_name()
                .filter(QCCheckFilter.from_params(params).clause())
                .order_by(QCCheck.created_at.desc(), QCCheck.production_date.desc())
                .all())
    except SQLAlchemyError as e:
        db.session.rollback()
        raise PersistenceError('Failed to fetch QC checks', str(e)) from e
    return [_serialize_for_display(c, emp_name) for c, emp_name in rows]


def get_qc_check(qc_id):
    try:
        row = (_with_approver_name()
               .filter(QCCheck.id == qc_id, QCCheck.is_active.is_(True))
               .first())
    except SQLAlchemyError as e:
        db.session.rollback()
        raise PersistenceError('Failed to fetch QC check', str(e)) from e
    if row is None:
        raise NotFoundError('QC Check not found', f'No active QC check with id {qc_id}')
    c, emp_name = row
    return _serialize_for_display(c, emp_name)


def _get_active_or_404(qc_id, message):
    qc = QCCheck.query.filter_by(id=qc_id, is_active=True).first()
    if qc is None:
        raise NotFoundError(message, f'No active QC check with id {qc_id}')
    return qc


def delete_qc_check(qc_id):
    """Soft delete: is_active goes false, the row stays. Returns the id."""
    with atomic('Failed to delete QC check'):
        qc = _get_active_or_404(qc_id, 'QC Check not found or already deleted')
        qc.is_active = False
        qc.updated_at = utc_now()
        deleted_id = qc.id
    return deleted_id


def update_qc_check(qc_id, patch):
    """Apply a patch (field -> new value); fields not in the patch keep their value."""
    with atomic('Failed to update QC check'):
        qc = _get_active_or_404(qc_id, 'QC Check not found')
        for field, value in patch.items():
            setattr(qc, field, value)
        qc.updated_at = utc_now()
        db.session.flush()
        result = serialize_qc_check(qc)
    return result
