from flask_wtf import FlaskForm
from wtforms import BooleanField, SubmitField
from wtforms.fields import DateTimeLocalField
from wtforms.validators import Optional


class TechWorksForm(FlaskForm):
    """Maintenance mode of the storefront; the end time is entered in the display timezone."""
    isTechWorks = BooleanField('Storefront is under maintenance')
    techWorksEndsAt = DateTimeLocalField('Switch off automatically at', format='%Y-%m-%dT%H:%M',
                                         validators=[Optional()])
    submit = SubmitField('Save')
