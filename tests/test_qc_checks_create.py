from qc_service.extensions import db
from qc_service.models import Employee, QCCheck

API = '/api/v1/qc-checks'


class TestCreateQCCheck:
    """POST /qc-checks"""

    def test_create_minimal(self, client):
        resp = client.post(API, json={'part_code': 'PC-100', 'production_date': '2024-03-15'})
        assert resp.status_code == 201

        body = resp.get_json()
        assert body['success'] is True
        assert body['message'] == 'QC Check created successfully'
        data = body['data']
        assert data['part_code'] == 'PC-100'
        assert data['production_date'] == '2024-03-15'
        assert data['data_from'] == 'Create'
        assert data['status'] == 'Complete'
        assert data['approved_by'] is None
        assert data['approved_by_name'] is None
        assert data['approved_at'] is not None
        assert data['created_at'] is not None

    def test_missing_part_code_is_rejected(self, client):
        resp = client.post(API, json={'production_date': '2024-03-15', 'part_name': 'Bracket'})
        assert resp.status_code == 400

        body = resp.get_json()
        assert body['success'] is False
        assert 'part_code' in body['message']
        assert 'part_code' in body['error']
        assert QCCheck.query.count() == 0

    def test_missing_production_date_is_rejected(self, client):
        resp = client.post(API, json={'part_code': 'PC-100'})
        assert resp.status_code == 400
        assert resp.get_json()['success'] is False
        assert QCCheck.query.count() == 0

    def test_empty_required_fields_are_rejected(self, client):
        resp = client.post(API, json={'part_code': '', 'production_date': ''})
        assert resp.status_code == 400
        assert QCCheck.query.count() == 0

    def test_no_body_is_rejected(self, client):
        resp = client.post(API)
        assert resp.status_code == 400
        assert QCCheck.query.count() == 0

    def test_approver_resolved_case_insensitively(self, client, employee):
        resp = client.post(API, json={
            'part_code': 'PC-100',
            'production_date': '2024-03-15',
            'approved_by': 'Jane Doe',
        })
        assert resp.status_code == 201

        data = resp.get_json()['data']
        assert data['approved_by'] == employee.id
        assert data['approved_by_name'] == 'Jane Doe'

        stored = db.session.get(QCCheck, data['id'])
        assert stored.approved_by == employee.id
        assert stored.approved_by_name == 'Jane Doe'

    def test_unknown_approver_keeps_name(self, client, employee):
        resp = client.post(API, json={
            'part_code': 'PC-100',
            'production_date': '2024-03-15',
            'approved_by': 'Nobody',
        })
        assert resp.status_code == 201

        data = resp.get_json()['data']
        assert data['approved_by'] is None
        assert data['approved_by_name'] == 'Nobody'

    def test_status_and_active_flag_are_fixed(self, client):
        resp = client.post(API, json={
            'part_code': 'PC-100',
            'production_date': '2024-03-15',
            'status': 'Rejected',
            'is_active': False,
            'remark': 'ignored on create',
        })
        assert resp.status_code == 201

        stored = db.session.get(QCCheck, resp.get_json()['data']['id'])
        assert stored.status == 'Complete'
        assert stored.is_active is True
        assert stored.remark is None

    def test_optional_fields_and_data_from(self, client):
        resp = client.post(API, json={
            'part_code': 'PC-200',
            'part_name': 'Housing',
            'vendor_name': 'Acme Castings',
            'vendor_id': 'V-17',
            'vendor_type': 'External',
            'production_date': '2024-03-15',
            'data_from': 'Sample',
        })
        data = resp.get_json()['data']
        assert data['part_name'] == 'Housing'
        assert data['vendor_name'] == 'Acme Castings'
        assert data['vendor_id'] == 'V-17'
        assert data['vendor_type'] == 'External'
        assert data['data_from'] == 'Sample'

    def test_blank_optional_fields_stored_as_null(self, client):
        resp = client.post(API, json={
            'part_code': 'PC-100',
            'production_date': '2024-03-15',
            'part_name': '',
            'data_from': '',
        })
        data = resp.get_json()['data']
        assert data['part_name'] is None
        assert data['data_from'] == 'Create'

    def test_html_is_stripped_from_text_fields(self, client):
        resp = client.post(API, json={
            'part_code': '  PC-100 ',
            'part_name': '<b>Bracket</b>',
            'production_date': '2024-03-15',
        })
        data = resp.get_json()['data']
        assert data['part_code'] == 'PC-100'
        assert data['part_name'] == 'Bracket'

    def test_special_characters_survive_and_filter(self, client, employee):
        resp = client.post(API, json={
            'part_code': 'PC&100',
            'part_name': 'Shaft <10mm>',
            'vendor_name': 'Smith & Sons',
            'production_date': '2024-03-15',
        })
        data = resp.get_json()['data']
        assert data['part_code'] == 'PC&100'
        assert data['part_name'] == 'Shaft <10mm>'
        assert data['vendor_name'] == 'Smith & Sons'

        body = client.get(API, query_string={'part_code': 'pc&1'}).get_json()
        assert body['total'] == 1
        assert body['data'][0]['vendor_name'] == 'Smith & Sons'

    def test_approver_with_ampersand_resolves(self, client):
        emp = Employee(emp_name='R & D Lead')
        db.session.add(emp)
        db.session.commit()

        resp = client.post(API, json={
            'part_code': 'PC-100',
            'production_date': '2024-03-15',
            'approved_by': 'r & d lead',
        })
        data = resp.get_json()['data']
        assert data['approved_by'] == emp.id
        assert data['approved_by_name'] == 'r & d lead'

    def test_unparseable_date_is_rejected(self, client):
        resp = client.post(API, json={'part_code': 'PC-100', 'production_date': 'not-a-date'})
        assert resp.status_code == 400
        assert 'production_date' in resp.get_json()['error']
        assert QCCheck.query.count() == 0

    def test_duplicate_part_and_date_allowed(self, client):
        payload = {'part_code': 'PC-100', 'production_date': '2024-03-15'}
        assert client.post(API, json=payload).status_code == 201
        assert client.post(API, json=payload).status_code == 201
        assert QCCheck.query.filter_by(part_code='PC-100', is_active=True).count() == 2
