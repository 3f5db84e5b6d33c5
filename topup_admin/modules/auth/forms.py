# File: topup_admin/modules/auth/forms.py
from flask_wtf import FlaskForm
from wtforms import PasswordField, StringField, SubmitField
from wtforms.validators import DataRequired


class LoginForm(FlaskForm):
    """
    Sign-in form. The identifier is an email or a phone number.
    """
    identifier = StringField('Email or phone', validators=[DataRequired(message="Please enter your email or phone.")])
    password = PasswordField('Password', validators=[DataRequired(message="Please enter your password.")])
    submit = SubmitField('Sign in')
