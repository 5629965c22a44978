from flask_sqlalchemy import SQLAlchemy
from flask_login import UserMixin
from datetime import datetime
import uuid

db = SQLAlchemy()

OUT_OF_STOCK = 'Out of Stock'
AVAILABILITY_CHOICES = ('In Stock', OUT_OF_STOCK, 'Pre-Order')
ROLES = ('admin', 'user')


def generate_id():
    return uuid.uuid4().hex


class Product(db.Model):
    __tablename__ = 'products'

    id = db.Column(db.String(64), primary_key=True, default=generate_id)
    name = db.Column(db.String(150), nullable=False, index=True)
    description = db.Column(db.Text, nullable=False, default='')
    price = db.Column(db.Float, nullable=False)
    image_src = db.Column(db.String(500), nullable=True)
    image_alt = db.Column(db.String(200), nullable=True)
    category = db.Column(db.String(100), nullable=False, index=True)
    data_ai_hint = db.Column(db.String(100), nullable=True)
    rating = db.Column(db.Float, nullable=True)  # 0-5
    review_count = db.Column(db.Integer, nullable=True)
    availability = db.Column(db.String(20), nullable=True)  # see AVAILABILITY_CHOICES
    features = db.Column(db.JSON, nullable=True)
    how_to_use = db.Column(db.JSON, nullable=True)  # list of steps or a single string
    ingredients = db.Column(db.JSON, nullable=True)  # list or a single string
    safety_info = db.Column(db.Text, nullable=True)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    @property
    def can_add_to_cart(self):
        return self.availability != OUT_OF_STOCK

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'description': self.description,
            'price': self.price,
            'imageSrc': self.image_src,
            'imageAlt': self.image_alt,
            'category': self.category,
            'dataAiHint': self.data_ai_hint,
            'rating': self.rating,
            'reviewCount': self.review_count,
            'availability': self.availability,
            'features': self.features or [],
            'howToUse': self.how_to_use,
            'ingredients': self.ingredients,
            'safetyInfo': self.safety_info,
        }

    def __repr__(self):
        return f'<Product {self.id} {self.name!r}>'


class AppUser(UserMixin, db.Model):
    __tablename__ = 'users'

    uid = db.Column(db.String(128), primary_key=True)  # auth provider subject id
    email = db.Column(db.String(150), nullable=True, index=True)
    display_name = db.Column(db.String(150), nullable=True)
    photo_url = db.Column(db.String(500), nullable=True)
    role = db.Column(db.String(20), nullable=False, default='user')  # 'admin', 'user'
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    def get_id(self):
        return self.uid

    @property
    def is_admin(self):
        return self.role == 'admin'

    @property
    def name(self):
        return self.display_name or self.email

    def __repr__(self):
        return f'<AppUser {self.uid} {self.role}>'


class LocalAccount(db.Model):
    """Account store backing the local auth provider."""

    __tablename__ = 'local_accounts'

    uid = db.Column(db.String(128), primary_key=True, default=generate_id)
    email = db.Column(db.String(150), unique=True, nullable=False)
    password = db.Column(db.String(150), nullable=False)
    display_name = db.Column(db.String(150), nullable=True)
    photo_url = db.Column(db.String(500), nullable=True)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
