from flask_wtf import FlaskForm
from wtforms import (StringField, PasswordField, SubmitField, IntegerField, FloatField,
                     TextAreaField, SelectField, HiddenField)
from wtforms.validators import DataRequired, InputRequired, Length, Email, NumberRange, Optional

from identity import MIN_PASSWORD_LENGTH
from models import AVAILABILITY_CHOICES


class LoginForm(FlaskForm):
    email = StringField('Email', validators=[
        DataRequired(message="This field is required"),
        Email(message="Enter a valid email address"),
        Length(max=150),
    ])
    password = PasswordField('Password', validators=[
        DataRequired(message="This field is required")
    ])
    # Honeypot field - should be left empty by humans
    honeypot = StringField('Middle Name', validators=[Length(max=0, message="Bot detected")])
    submit = SubmitField('Login with Email')


class SignupForm(FlaskForm):
    display_name = StringField('Display name', validators=[Optional(), Length(max=150)])
    email = StringField('Email', validators=[
        DataRequired(message="This field is required"),
        Email(message="Enter a valid email address"),
        Length(max=150),
    ])
    password = PasswordField('Password', validators=[
        DataRequired(message="This field is required"),
        Length(min=MIN_PASSWORD_LENGTH,
               message=f"Password should be at least {MIN_PASSWORD_LENGTH} characters."),
    ])
    honeypot = StringField('Middle Name', validators=[Length(max=0, message="Bot detected")])
    submit = SubmitField('Signup with Email')


class GoogleSignInForm(FlaskForm):
    id_token = HiddenField(validators=[DataRequired()])


class AddToCartForm(FlaskForm):
    quantity = IntegerField('Quantity', default=1, validators=[
        DataRequired(), NumberRange(min=1, max=99, message="Quantity must be between 1 and 99")
    ])
    submit = SubmitField('Add to Cart')


class UpdateCartForm(FlaskForm):
    quantity = IntegerField('Quantity', validators=[
        InputRequired(), NumberRange(min=0, max=99, message="Quantity must be between 0 and 99")
    ])
    submit = SubmitField('Update')


class ProductForm(FlaskForm):
    name = StringField('Name', validators=[DataRequired(), Length(max=150)])
    description = TextAreaField('Description', validators=[DataRequired()])
    price = FloatField('Price', validators=[
        InputRequired(), NumberRange(min=0, message="Price cannot be negative")
    ])
    category = StringField('Category', validators=[DataRequired(), Length(max=100)])
    image_src = StringField('Image URL', validators=[Optional(), Length(max=500)])
    image_alt = StringField('Image alt text', validators=[Optional(), Length(max=200)])
    availability = SelectField('Availability', choices=[(c, c) for c in AVAILABILITY_CHOICES])
    features = TextAreaField('Features (one per line)', validators=[Optional()])
    how_to_use = TextAreaField('How to use (one step per line)', validators=[Optional()])
    ingredients = TextAreaField('Ingredients (one per line)', validators=[Optional()])
    safety_info = TextAreaField('Safety information', validators=[Optional()])
    submit = SubmitField('Create Product')

    def product_fields(self):
        return {
            'name': self.name.data.strip(),
            'description': self.description.data.strip(),
            'price': round(self.price.data, 2),
            'category': self.category.data.strip(),
            'image_src': self.image_src.data or None,
            'image_alt': self.image_alt.data or self.name.data.strip(),
            'availability': self.availability.data,
            'features': _lines(self.features.data),
            'how_to_use': _lines(self.how_to_use.data),
            'ingredients': _lines(self.ingredients.data),
            'safety_info': self.safety_info.data or None,
        }


def _lines(text):
    return [line.strip() for line in (text or '').splitlines() if line.strip()]
