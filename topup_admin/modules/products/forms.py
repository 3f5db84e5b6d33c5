from flask_wtf import FlaskForm
from flask_wtf.file import FileAllowed
from wtforms import (
    DecimalField, FieldList, Form, FormField, IntegerField, MultipleFileField,
    SelectField, StringField, SubmitField, TextAreaField,
)
from wtforms.validators import DataRequired, Length, NumberRange, Optional, ValidationError

IMAGE_EXTENSIONS = ['jpg', 'jpeg', 'png', 'webp', 'gif']


class ReplenishmentForm(Form):
    """One top-up package of a product. Sub-form, so no CSRF token of its own."""
    price = DecimalField('Price', places=2,
                         validators=[DataRequired(message="Price is required."),
                                     NumberRange(min=0.01, message="Price must be greater than 0.")])
    amount = IntegerField('Amount',
                          validators=[DataRequired(message="Amount is required."),
                                      NumberRange(min=1, message="Amount must be at least 1.")])
    type = StringField('Type', validators=[DataRequired(message="Type is required.")])
    sku = StringField('SKU', validators=[Optional()])


class ProductForm(FlaskForm):
    name = StringField('Name', validators=[
        DataRequired(message="Name is required."),
        Length(min=2, message="Name must be at least 2 characters."),
    ])
    description = TextAreaField('Description', validators=[
        DataRequired(message="Description is required."),
        Length(min=10, message="Description must be at least 10 characters."),
    ])
    smile_api_game = SelectField('Smile game', choices=[], validate_choice=False, validators=[Optional()])
    images = MultipleFileField('Images', validators=[FileAllowed(IMAGE_EXTENSIONS, 'Images only.')])
    replenishment = FieldList(FormField(ReplenishmentForm), min_entries=1)

    add_row = SubmitField('Add package')
    remove_row = SubmitField('Remove last package')
    submit = SubmitField('Save')

    def validate_replenishment(self, field):
        if not field.entries:
            raise ValidationError("Add at least one replenishment package.")
