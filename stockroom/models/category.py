"""
Category Model
"""

from stockroom.database import db


class Category(db.Model):
    """Named grouping of products, identified by a unique code"""
    __tablename__ = 'categories'

    id = db.Column(db.Integer, primary_key=True)
    code = db.Column(db.String(20), unique=True, nullable=False, index=True)
    name = db.Column(db.String(100), nullable=False)

    def __repr__(self):
        return f'<Category {self.code}>'

    def to_dict(self):
        """Convert to dictionary"""
        return {
            'id': self.id,
            'code': self.code,
            'name': self.name,
        }
