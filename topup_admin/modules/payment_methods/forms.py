from flask_wtf import FlaskForm
from wtforms import BooleanField, DecimalField, StringField, SubmitField, TextAreaField
from wtforms.validators import DataRequired, Length, NumberRange, Optional, Regexp, ValidationError


class PaymentMethodForm(FlaskForm):
    name = StringField('Name', validators=[DataRequired(message="Name is required."), Length(max=100)])
    code = StringField('Code', validators=[
        DataRequired(message="Code is required."),
        Regexp(r'^[a-z0-9_-]+$', message="Use lowercase letters, digits, '-' and '_'."),
        Length(max=50),
    ])
    country = StringField('Country', validators=[
        DataRequired(message="Country is required."),
        Regexp(r'^[A-Za-z]{2}$', message="Use a two-letter country code."),
    ])
    currency = StringField('Currency', validators=[
        DataRequired(message="Currency is required."),
        Regexp(r'^[A-Za-z]{3}$', message="Use a three-letter currency code."),
    ])
    minAmount = DecimalField('Minimum amount', places=2, validators=[
        Optional(), NumberRange(min=0, message="Amount cannot be negative."),
    ])
    maxAmount = DecimalField('Maximum amount', places=2, validators=[
        Optional(), NumberRange(min=0, message="Amount cannot be negative."),
    ])
    fee = DecimalField('Fee, %', places=2, validators=[
        Optional(), NumberRange(min=0, max=100, message="Fee must be between 0 and 100."),
    ])
    isActive = BooleanField('Active', default=True)
    description = TextAreaField('Description', validators=[Optional(), Length(max=500)])
    submit = SubmitField('Save')

    def validate_maxAmount(self, field):
        if field.data is not None and self.minAmount.data is not None and field.data < self.minAmount.data:
            raise ValidationError("Maximum amount cannot be below the minimum.")
