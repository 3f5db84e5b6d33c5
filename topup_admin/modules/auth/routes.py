from flask import current_app, flash, redirect, render_template, request, url_for
from flask_login import current_user, login_user, logout_user

from ...core.error_handlers import ApiError
from ...core.signals import admin_logged_in, admin_logged_out
from ...utils.urls import is_safe_redirect
from . import auth_bp as blueprint
from .forms import LoginForm
from .services import AuthService


@blueprint.route('/login', methods=['GET', 'POST'])
def login():
    if current_user.is_authenticated:
        return redirect(url_for('dashboard.index'))

    form = LoginForm()
    if form.validate_on_submit():
        identifier = form.identifier.data.strip()
        if not AuthService.is_allowed(identifier):
            current_app.logger.warning("Refused sign-in for non-admin identifier %s", identifier)
            flash('Access denied. You are not an administrator.', 'danger')
            return render_template('auth/login.html', form=form), 403

        try:
            user = AuthService.login(identifier, form.password.data)
        except ApiError as exc:
            current_app.logger.info("Sign-in failed for %s: %s", identifier, exc.message)
            flash('Invalid email or password', 'danger')
            return redirect(url_for('auth.login'))

        login_user(user)
        admin_logged_in.send(current_app._get_current_object(), identifier=user.identifier, role=user.role)
        flash('Signed in.', 'success')

        next_page = request.args.get('next')
        if not is_safe_redirect(next_page):
            next_page = url_for('dashboard.index')
        return redirect(next_page)

    return render_template('auth/login.html', form=form)


@blueprint.route('/logout', methods=['GET', 'POST'])
def logout():
    identifier = getattr(current_user, 'identifier', None)
    AuthService.logout()
    logout_user()
    admin_logged_out.send(current_app._get_current_object(), identifier=identifier)
    flash('Signed out.', 'info')
    return redirect(url_for('auth.login'))
