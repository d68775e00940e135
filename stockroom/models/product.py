"""
Product Model
"""

from stockroom.database import db


class Product(db.Model):
    """Product model, always belonging to one category"""
    __tablename__ = 'products'

    id = db.Column(db.Integer, primary_key=True)
    code = db.Column(db.String(20), unique=True, nullable=False, index=True)
    name = db.Column(db.String(100), nullable=False)
    stock = db.Column(db.Integer, default=0, nullable=False)
    price = db.Column(db.Float, default=0.0, nullable=False)
    category_id = db.Column(db.Integer, db.ForeignKey('categories.id'), nullable=False, index=True)

    # Not mapped: filled in only when the service joins the full category record
    category = None

    def __repr__(self):
        return f'<Product {self.code}>'

    def to_dict(self):
        """Convert to dictionary"""
        if self.category is not None and self.category.id == self.category_id:
            category = self.category.to_dict()
        else:
            category = {'id': self.category_id}
        return {
            'id': self.id,
            'code': self.code,
            'name': self.name,
            'stock': self.stock,
            'price': self.price,
            'category': category,
        }
