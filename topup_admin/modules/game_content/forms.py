from flask_wtf import FlaskForm
from wtforms import BooleanField, IntegerField, SelectField, StringField, SubmitField, TextAreaField
from wtforms.validators import DataRequired, Length, NumberRange, Optional


class GameContentForm(FlaskForm):
    """
    Description and top-up instruction of a game.

    Instruction steps are entered one per line; text after ' | ' is the
    highlighted part of the step.
    """
    gameId = SelectField('Game', choices=[], validators=[DataRequired(message="Choose a game.")])
    description = TextAreaField('Description', validators=[DataRequired(message="Description is required.")])
    headerText = StringField('Instruction header', validators=[
        DataRequired(message="Instruction header is required."), Length(max=255),
    ])
    steps = TextAreaField('Instruction steps', validators=[DataRequired(message="Add at least one step.")])
    submit = SubmitField('Save')


class GameContentEditForm(GameContentForm):
    # The game of existing content cannot change
    gameId = None
    gameName = StringField('Game name', validators=[Optional(), Length(max=255)])


class ReviewForm(FlaskForm):
    userName = StringField('Name', validators=[DataRequired(message="Name is required."), Length(max=100)])
    rating = IntegerField('Rating', default=5, validators=[
        DataRequired(message="Rating is required."),
        NumberRange(min=1, max=5, message="Rating must be between 1 and 5."),
    ])
    comment = TextAreaField('Comment', validators=[DataRequired(message="Comment is required.")])
    verified = BooleanField('Verified purchase')
    submit = SubmitField('Add review')


class FAQForm(FlaskForm):
    question = StringField('Question', validators=[DataRequired(message="Question is required.")])
    answer = TextAreaField('Answer', validators=[DataRequired(message="Answer is required.")])
    submit = SubmitField('Add question')


class TranslationForm(FlaskForm):
    """English copy of a game's content; untranslated fields fall back to Russian on the storefront."""
    gameName_en = StringField('Game name (English)', validators=[Optional(), Length(max=255)])
    description_en = TextAreaField('Description (English)', validators=[Optional()])
    headerText_en = StringField('Instruction header (English)', validators=[Optional(), Length(max=255)])
    steps_en = TextAreaField('Instruction steps (English)', validators=[Optional()])
    submit = SubmitField('Save translation')
