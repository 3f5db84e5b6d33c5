from flask_wtf import FlaskForm
from wtforms import BooleanField, SelectMultipleField, StringField, SubmitField, TextAreaField
from wtforms.validators import DataRequired, Length, Optional, Regexp, URL, ValidationError

from ...utils.slug import generate_slug

SLUG_PATTERN = r'^[a-zа-яё0-9]+(?:-[a-zа-яё0-9]+)*$'


class SlugFormMixin:
    """Fill a blank slug from the title (or name) field before validating."""
    slug_source = 'title'

    def validate(self, extra_validators=None):
        if not (self.slug.data or '').strip():
            source = getattr(self, self.slug_source).data or ''
            self.slug.data = generate_slug(source)
        else:
            self.slug.data = self.slug.data.strip()
        return super().validate(extra_validators=extra_validators)


class ArticleForm(SlugFormMixin, FlaskForm):
    title = StringField('Title', validators=[
        DataRequired(message="Title is required."),
        Length(max=255, message="Title must be at most 255 characters."),
    ])
    slug = StringField('Slug', validators=[
        DataRequired(message="Slug is required."),
        Regexp(SLUG_PATTERN, message="Use lowercase letters, digits and single hyphens."),
    ])
    excerpt = TextAreaField('Excerpt', validators=[Optional()])
    content = TextAreaField('Content')
    featured_image = StringField('Featured image URL', validators=[Optional(), URL(message="Enter a valid URL.")])
    meta_title = StringField('Meta title', validators=[
        Optional(), Length(max=60, message="Meta title must be at most 60 characters."),
    ])
    meta_description = TextAreaField('Meta description', validators=[
        Optional(), Length(max=160, message="Meta description must be at most 160 characters."),
    ])
    is_published = BooleanField('Published')
    tag_ids = SelectMultipleField('Tags', coerce=int, choices=[], validate_choice=False)
    submit = SubmitField('Save')

    def validate_content(self, field):
        if self.is_published.data and not (field.data or '').strip():
            raise ValidationError("Content is required for a published article.")


class TagForm(SlugFormMixin, FlaskForm):
    slug_source = 'name'

    name = StringField('Name', validators=[
        DataRequired(message="Name is required."),
        Length(max=50, message="Name must be at most 50 characters."),
    ])
    slug = StringField('Slug', validators=[
        DataRequired(message="Slug is required."),
        Regexp(SLUG_PATTERN, message="Use lowercase letters, digits and single hyphens."),
    ])
    description = TextAreaField('Description', validators=[Optional()])
    color = StringField('Color', validators=[
        Optional(), Regexp(r'^#[0-9a-fA-F]{6}$', message="Use a hex color like #3366ff."),
    ])
    submit = SubmitField('Save')
