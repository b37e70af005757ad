import pytest
from datetime import date, datetime, timezone
from qc_service import create_app
from qc_service.extensions import db
from qc_service.models import Employee, QCCheck


@pytest.fixture
def app():
    """Fresh app on an in-memory SQLite database for each test."""
    app = create_app('testing')
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def employee(app):
    emp = Employee(emp_name='jane doe')
    db.session.add(emp)
    db.session.commit()
    return emp


@pytest.fixture
def make_check(app):
    """Insert a QC check row directly, bypassing the API."""
    def _make(**overrides):
        now = datetime(2024, 1, 1, 8, 0, tzinfo=timezone.utc)
        values = {
            'part_code': 'PC-100',
            'part_name': 'Bracket',
            'vendor_name': 'Acme Castings',
            'production_date': date(2024, 1, 15),
            'approved_by_name': 'Jane Doe',
            'approved_at': now,
            'data_from': 'Create',
            'status': 'Complete',
            'created_at': now,
            'updated_at': now,
            'is_active': True,
        }
        values.update(overrides)
        qc = QCCheck(**values)
        db.session.add(qc)
        db.session.commit()
        return qc.id
    return _make
