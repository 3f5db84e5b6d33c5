from flask_wtf import FlaskForm
from wtforms import IntegerField, SelectMultipleField, StringField, SubmitField
from wtforms.validators import DataRequired, Length, NumberRange, Optional


class CouponForm(FlaskForm):
    code = StringField('Code', validators=[
        DataRequired(message="Code is required."),
        Length(min=3, max=20, message="Code must be 3 to 20 characters."),
    ])
    discount = IntegerField('Discount, %', validators=[
        DataRequired(message="Discount is required."),
        NumberRange(min=1, max=100, message="Discount must be between 1 and 100."),
    ])
    limit = IntegerField('Usage limit', validators=[
        Optional(), NumberRange(min=1, message="Limit must be at least 1."),
    ])
    # No games selected means the coupon works for every game
    gameIds = SelectMultipleField('Games', coerce=int, choices=[], validators=[Optional()])
    submit = SubmitField('Save')


class CouponCheckForm(FlaskForm):
    code = StringField('Code', validators=[DataRequired(message="Enter a code to check.")])
    submit = SubmitField('Check')
