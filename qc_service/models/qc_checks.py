from qc_service.extensions import db
from datetime import datetime, timezone


def utc_now():
    return datetime.now(timezone.utc)


class QCCheck(db.Model):
    __tablename__ = 'qc_checks'

    id = db.Column(db.Integer, primary_key=True)
    part_code = db.Column(db.String(100), nullable=False)
    part_name = db.Column(db.String(300))
    vendor_name = db.Column(db.String(300))
    vendor_id = db.Column(db.String(100))
    vendor_type = db.Column(db.String(50))
    production_date = db.Column(db.Date, nullable=False)
    # approved_by is advisory (may be null or stale); approved_by_name is what gets displayed
    approved_by = db.Column(db.Integer, db.ForeignKey('employees.id'))
    approved_by_name = db.Column(db.String(200))
    approved_at = db.Column(db.DateTime(timezone=True))
    data_from = db.Column(db.String(50), default='Create')
    status = db.Column(db.String(50), default='Complete')
    remark = db.Column(db.Text)
    created_at = db.Column(db.DateTime(timezone=True), default=utc_now)
    updated_at = db.Column(db.DateTime(timezone=True), default=utc_now)
    is_active = db.Column(db.Boolean, default=True, nullable=False)
