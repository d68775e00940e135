import os
import pytest

# Set test environment variables before importing the app
os.environ['FLASK_ENV'] = 'testing'
os.environ['DATABASE_URL'] = 'sqlite:///:memory:'

from stockroom import create_app
from stockroom.models import db, Category, Product


@pytest.fixture(scope='session')
def app():
    """Create application for the tests."""
    app = create_app('testing')

    with app.app_context():
        # Create all database tables
        db.create_all()
        yield app
        # Clean up
        db.drop_all()


@pytest.fixture
def client(app):
    """A test client for the app."""
    return app.test_client()


@pytest.fixture
def db_session(app):
    """Create a database session for a test."""
    with app.app_context():
        db.create_all()

        yield db.session

        # Clean up tables
        db.session.rollback()
        for table in reversed(db.metadata.sorted_tables):
            db.session.execute(table.delete())
        db.session.commit()
        db.session.remove()


@pytest.fixture
def sample_category(db_session):
    """Create a sample category for testing."""
    return create_test_category(db_session, code='ELEC', name='Electronics')


@pytest.fixture
def sample_product(db_session, sample_category):
    """Create a sample product for testing."""
    return create_test_product(
        db_session, sample_category,
        code='TV01', name='Television', stock=5, price=399.99
    )


# Helper functions for tests
def create_test_category(db_session, **kwargs):
    """Create a test category with default values."""
    import uuid
    defaults = {
        'code': f'CAT-{str(uuid.uuid4())[:8]}',
        'name': 'Test Category',
    }
    defaults.update(kwargs)

    category = Category(**defaults)
    db_session.add(category)
    db_session.commit()
    return category


def create_test_product(db_session, category, **kwargs):
    """Create a test product with default values."""
    import uuid
    defaults = {
        'code': f'PRD-{str(uuid.uuid4())[:8]}',
        'name': 'Test Product',
        'stock': 10,
        'price': 9.99,
        'category_id': category.id,
    }
    defaults.update(kwargs)

    product = Product(**defaults)
    db_session.add(product)
    db_session.commit()
    return product


def generate_category_data(**kwargs):
    """Generate category request data."""
    defaults = {
        'code': 'BOOK',
        'name': 'Books',
    }
    defaults.update(kwargs)
    return defaults


def generate_product_data(category_id, **kwargs):
    """Generate product request data."""
    defaults = {
        'code': 'NOV01',
        'name': 'Novel',
        'stock': 12,
        'price': 14.5,
        'category_id': category_id,
    }
    defaults.update(kwargs)
    return defaults
