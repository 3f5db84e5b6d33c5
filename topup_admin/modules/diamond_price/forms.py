from flask_wtf import FlaskForm
from wtforms import BooleanField, DecimalField, SelectField, SubmitField
from wtforms.validators import DataRequired, InputRequired, NumberRange

CURRENCIES = [
    ('RUB', 'Rouble (₽)'),
    ('USD', 'Dollar ($)'),
    ('EUR', 'Euro (€)'),
    ('BRL', 'Real (R$)'),
]


class DiamondPriceForm(FlaskForm):
    """Price of one diamond for the custom amount top-up."""
    price_per_diamond = DecimalField('Price per diamond', places=4, validators=[
        InputRequired(message="Price is required."),
        NumberRange(min=0.0001, message="Price must be greater than 0."),
    ])
    currency = SelectField('Currency', choices=CURRENCIES, default='RUB',
                           validators=[DataRequired(message="Choose a currency.")])
    custom_amount_enabled = BooleanField('Customers may enter any amount', default=True)
    submit = SubmitField('Save')
