from qc_service.extensions import db


class Employee(db.Model):
    """Read-only here; rows are owned by the HR side of the plant database."""
    __tablename__ = 'employees'

    id = db.Column(db.Integer, primary_key=True)
    emp_name = db.Column(db.String(200), nullable=False)
