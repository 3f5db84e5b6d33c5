from flask_wtf import FlaskForm
from flask_wtf.file import FileAllowed, FileField, FileRequired
from wtforms import HiddenField, StringField, SubmitField
from wtforms.validators import DataRequired, Length, Regexp

IMAGE_EXTENSIONS = ['jpg', 'jpeg', 'png', 'webp', 'gif']


class BannerForm(FlaskForm):
    title = StringField('Title', validators=[DataRequired(message="Title is required."), Length(max=255)])
    buttonLink = StringField('Button link', validators=[
        DataRequired(message="Button link is required."),
        Regexp(r'^(https?://|/)\S*$', message="Enter a full URL or a path starting with /."),
    ])
    image = FileField('Desktop image', validators=[FileAllowed(IMAGE_EXTENSIONS, 'Images only.')])
    mobileImage = FileField('Mobile image', validators=[FileAllowed(IMAGE_EXTENSIONS, 'Images only.')])
    submit = SubmitField('Save')


class BannerImageForm(FlaskForm):
    target = HiddenField(default='image')
    file = FileField('Image', validators=[
        FileRequired(message="Choose an image."),
        FileAllowed(IMAGE_EXTENSIONS, 'Images only.'),
    ])
    submit = SubmitField('Upload')
