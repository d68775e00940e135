import json
from unittest.mock import patch
from sqlalchemy.exc import OperationalError

from tests.conftest import (
    create_test_category, create_test_product,
    generate_category_data, generate_product_data
)


class TestCategoryEndpoints:
    """Test category REST endpoints."""

    def test_create_category(self, client, db_session):
        response = client.post('/api/v1/categories/',
                               data=json.dumps(generate_category_data()),
                               content_type='application/json')

        assert response.status_code == 201
        json_data = response.get_json()
        assert json_data['code'] == 'BOOK'
        assert json_data['id'] is not None

    def test_create_category_duplicate(self, client, db_session):
        create_test_category(db_session, code='BOOK')

        response = client.post('/api/v1/categories/', json=generate_category_data())

        assert response.status_code == 400
        assert response.get_json()['error'] == 'validation_failed'

    def test_create_category_invalid_body(self, client, db_session):
        response = client.post('/api/v1/categories/', json={'name': 'No code'})

        assert response.status_code == 400
        assert 'code' in response.get_json()['details']

    def test_list_categories(self, client, db_session):
        create_test_category(db_session, code='A')
        create_test_category(db_session, code='B')

        response = client.get('/api/v1/categories/')

        assert response.status_code == 200
        assert [c['code'] for c in response.get_json()] == ['A', 'B']

    def test_get_category_by_code_and_name(self, client, db_session, sample_category):
        by_code = client.get('/api/v1/categories/code/ELEC')
        by_name = client.get('/api/v1/categories/name/Electronics')

        assert by_code.status_code == 200
        assert by_name.get_json()['code'] == 'ELEC'

    def test_get_category_not_found(self, client, db_session):
        response = client.get('/api/v1/categories/code/NONEXISTENT')

        assert response.status_code == 404
        assert response.get_json()['error'] == 'not_found'

    def test_modify_category(self, client, db_session, sample_category):
        response = client.put('/api/v1/categories/code/ELEC', json={'name': 'Gadgets'})

        assert response.status_code == 200
        assert response.get_json() == {'id': sample_category.id, 'code': 'ELEC', 'name': 'Gadgets'}

    def test_remove_category_with_products_refused(self, client, db_session, sample_product):
        response = client.delete('/api/v1/categories/code/ELEC')

        assert response.status_code == 400
        assert client.get('/api/v1/categories/code/ELEC').status_code == 200

    def test_remove_empty_category(self, client, db_session, sample_category):
        response = client.delete('/api/v1/categories/code/ELEC')

        assert response.status_code == 200
        assert client.get('/api/v1/categories/code/ELEC').status_code == 404

    def test_category_products(self, client, db_session, sample_product):
        response = client.get('/api/v1/categories/code/ELEC/products')

        assert response.status_code == 200
        assert [p['code'] for p in response.get_json()] == ['TV01']


class TestProductEndpoints:
    """Test product REST endpoints."""

    def test_create_product(self, client, db_session, sample_category):
        response = client.post('/api/v1/products/', json=generate_product_data(sample_category.id))

        assert response.status_code == 201
        json_data = response.get_json()
        assert json_data['code'] == 'NOV01'
        assert json_data['category'] == {'id': sample_category.id}

    def test_create_product_unknown_category(self, client, db_session):
        response = client.post('/api/v1/products/', json=generate_product_data(9999))

        assert response.status_code == 400
        assert client.get('/api/v1/products/').get_json() == []

    def test_create_product_negative_stock(self, client, db_session, sample_category):
        response = client.post('/api/v1/products/',
                               json=generate_product_data(sample_category.id, stock=-1))

        assert response.status_code == 400
        assert 'stock' in response.get_json()['details']

    def test_get_product_with_category(self, client, db_session, sample_product):
        plain = client.get('/api/v1/products/code/TV01')
        enriched = client.get('/api/v1/products/code/TV01?with_category=true')

        assert plain.status_code == 200
        assert enriched.get_json()['category'] == {
            'id': sample_product.category_id,
            'code': 'ELEC',
            'name': 'Electronics',
        }

    def test_get_product_by_name(self, client, db_session, sample_product):
        response = client.get('/api/v1/products/name/Television')

        assert response.status_code == 200
        assert response.get_json()['code'] == 'TV01'

    def test_modify_product(self, client, db_session, sample_product):
        response = client.put('/api/v1/products/code/TV01', json={'stock': 2, 'price': 299.5})

        assert response.status_code == 200
        json_data = response.get_json()
        assert json_data['stock'] == 2
        assert json_data['price'] == 299.5
        assert json_data['name'] == 'Television'

    def test_remove_product(self, client, db_session, sample_product):
        response = client.delete('/api/v1/products/code/TV01')

        assert response.status_code == 200
        assert client.get('/api/v1/products/code/TV01').status_code == 404

    def test_min_stock(self, client, db_session, sample_category):
        create_test_product(db_session, sample_category, code='LOW', stock=1)
        create_test_product(db_session, sample_category, code='HIGH', stock=30)

        response = client.get('/api/v1/products/min-stock/10')
        invalid = client.get('/api/v1/products/min-stock/0')

        assert [p['code'] for p in response.get_json()] == ['HIGH']
        assert invalid.status_code == 400


class TestHealthCheck:
    """Test health check endpoint."""

    def test_health_check_basic(self, client, db_session):
        response = client.get('/health')

        assert response.status_code == 200
        json_data = response.get_json()
        assert json_data['status'] == 'healthy'
        assert json_data['database']['status'] == 'healthy'

    def test_health_check_database_down(self, client, db_session):
        with patch('stockroom.api.controllers.health.db') as mock_db:
            mock_db.session.execute.side_effect = OperationalError('SELECT 1', {}, Exception('down'))
            response = client.get('/health')

            assert response.status_code == 503
            assert response.get_json()['database']['status'] == 'unhealthy'
            mock_db.session.rollback.assert_called_once()
