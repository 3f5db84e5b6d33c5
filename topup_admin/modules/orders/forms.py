from flask_wtf import FlaskForm
from wtforms import IntegerField, RadioField, SelectField, StringField, SubmitField
from wtforms.validators import InputRequired, NumberRange, Optional

ORDER_STATUSES = [('', 'All statuses'), ('Pending', 'Pending'), ('Paid', 'Paid'), ('Cancelled', 'Cancelled')]
PAYMENT_METHODS = [('', 'All methods'), ('SBP', 'SBP'), ('CreditCard', 'Credit card'),
                   ('SberPay', 'SberPay'), ('T-Bank', 'T-Bank')]
PROVIDER_STATUSES = [('', 'All provider states'), ('pending', 'Pending'), ('processing', 'Processing'),
                     ('success', 'Success'), ('failed', 'Failed'), ('cancelled', 'Cancelled')]

ORDER_PAYMENT_OPTIONS = [('Tinkoff', 'T-Bank'), ('Pagsmile', 'Pagsmile'), ('Smile', 'Smile API')]


class OrderFilterForm(FlaskForm):
    """GET form above the orders table."""
    class Meta:
        csrf = False

    search = StringField('Search', validators=[Optional()])
    status = SelectField('Order status', choices=ORDER_STATUSES, validators=[Optional()])
    method = SelectField('Payment method', choices=PAYMENT_METHODS, validators=[Optional()])
    providerStatus = SelectField('Provider status', choices=PROVIDER_STATUSES, validators=[Optional()])


class CreateOrderForm(FlaskForm):
    product_id = IntegerField('Product', validators=[InputRequired(message="Choose a product.")])
    item_id = IntegerField('Package', validators=[
        InputRequired(message="Choose a package."),
        NumberRange(min=0, message="Choose a package."),
    ])
    payment = RadioField('Payment method', choices=ORDER_PAYMENT_OPTIONS, default='Tinkoff',
                         validators=[InputRequired(message="Choose a payment method.")])
    account_id = StringField('Account ID', validators=[Optional()])
    server_id = StringField('Server ID', validators=[Optional()])
    quantity = IntegerField('Quantity', default=1, validators=[
        Optional(), NumberRange(min=1, message="Quantity must be at least 1."),
    ])
    submit = SubmitField('Create order')
