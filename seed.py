"""
Seed script for local development.
Run: python seed.py
Safe to re-run: creates missing tables and skips employees that already exist.
"""
import sys

from qc_service import create_app
from qc_service.extensions import db
from qc_service.models import Employee

app = create_app()

SAMPLE_EMPLOYEES = [
    'Jane Doe',
    'Ravi Kumar',
    'Priya Sharma',
    'Arjun Mehta',
]


def seed():
    with app.app_context():
        print("Seeding database...")

        try:
            db.session.execute(db.text("SELECT 1"))
            print("✓ Database connected")
        except Exception as e:
            print(f"✗ Database connection failed: {e}")
            print("  Make sure PostgreSQL is running and the database exists.")
            print("  Run: createdb qc_checks")
            sys.exit(1)

        db.create_all()
        print("✓ Tables ensured: employees, qc_checks")

        for name in SAMPLE_EMPLOYEES:
            exists = Employee.query.filter(db.func.lower(Employee.emp_name) == name.lower()).first()
            if not exists:
                print(f"  Adding employee {name}...")
                db.session.add(Employee(emp_name=name))

        db.session.commit()
        print("✓ Seed data applied successfully")
        print()
        print("Test with:")
        print('  curl http://localhost:5000/api/v1/health')
        print('  curl -X POST -H "Content-Type: application/json" \\')
        print('       -d \'{"part_code": "PC-100", "production_date": "2024-03-15", "approved_by": "Jane Doe"}\' \\')
        print('       http://localhost:5000/api/v1/qc-checks')


if __name__ == '__main__':
    seed()
