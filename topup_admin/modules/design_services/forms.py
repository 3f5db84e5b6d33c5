from flask_wtf import FlaskForm
from wtforms import BooleanField, DecimalField, IntegerField, StringField, SubmitField, TextAreaField
from wtforms.validators import DataRequired, InputRequired, Length, NumberRange, Optional, Regexp


class DesignServiceForm(FlaskForm):
    service_key = StringField('Service key', validators=[
        DataRequired(message="Service key is required."),
        Regexp(r'^[a-z0-9_-]+$', message="Use lowercase letters, digits, '-' and '_'."),
        Length(max=100),
    ])
    title = StringField('Title', validators=[DataRequired(message="Title is required."), Length(max=255)])
    description = TextAreaField('Description', validators=[Optional()])
    price = DecimalField('Price', places=2, validators=[
        InputRequired(message="Price is required."),
        NumberRange(min=0, message="Price cannot be negative."),
    ])
    is_active = BooleanField('Active', default=True)
    sort_order = IntegerField('Sort order', default=0, validators=[Optional()])
    submit = SubmitField('Save')


class PriceForm(FlaskForm):
    price = DecimalField('Price', places=2, validators=[
        InputRequired(message="Price is required."),
        NumberRange(min=0, message="Price cannot be negative."),
    ])
    submit = SubmitField('Update')
