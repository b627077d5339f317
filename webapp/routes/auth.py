"""
Authentication Routes

Handles login, logout and the password reset form.
"""

import logging
import math

from flask import Blueprint, render_template, request, redirect, url_for, flash, g, current_app

from src.models.identity import Identity
from webapp.app import get_identity_store
from webapp.services.errors import StorefrontError, IdentityParseError
from webapp.services.navigation import Navigator
from webapp.services.password_reset import PasswordResetFlow
from webapp.services.profile import ProfileViewModel
from webapp.services.scheduling import PageScheduler

logger = logging.getLogger(__name__)

auth_bp = Blueprint('auth', __name__)


@auth_bp.route('/login', methods=['GET', 'POST'])
def login():
    """Login page; a successful login stores the identity marker."""
    if request.method == 'POST':
        email = request.form.get('email', '')
        password = request.form.get('password', '')

        if not email or not password:
            flash('Please enter both email and password.', 'error')
            return render_template('login.html', email=email, has_error=True)

        account = get_identity_store().verify_credentials(email, password)
        if not account:
            logger.info(f"Failed login for {email}")
            flash('Invalid email or password. Please try again.', 'error')
            return render_template('login.html', email=email, has_error=True)

        try:
            identity = Identity.from_account(account)
        except IdentityParseError as e:
            logger.error(f"Account {email} has invalid profile data: {e.message}")
            flash('Your account details could not be loaded. Please contact support.', 'error')
            return render_template('login.html', email=email, has_error=True)

        g.session_state.store(identity)
        return redirect(url_for('storefront.profile'))

    return render_template('login.html')


@auth_bp.route('/logout', methods=['POST'])
def logout():
    """Clear the identity marker and return to the login page."""
    navigator = Navigator()
    ProfileViewModel(g.session_state, navigator).logout()
    return redirect(navigator.target)


@auth_bp.route('/ForgetPassword', methods=['GET', 'POST'])
def forget_password():
    """Password reset form."""
    if request.method == 'POST':
        email = request.form.get('email', '')
        password = request.form.get('password', '')
        confirm_password = request.form.get('confirmPassword', '')

        scheduler = PageScheduler()
        flow = PasswordResetFlow(
            get_identity_store(),
            Navigator(),
            scheduler=scheduler,
            redirect_delay=current_app.config['RESET_REDIRECT_DELAY_MS'] / 1000.0,
        )

        try:
            flow.submit(email, password, confirm_password)
        except StorefrontError as e:
            flash(e.message, 'error')
            return render_template('forget_password.html', email=email, has_error=True)

        flash(flow.message, 'success')
        pending = scheduler.pending
        redirect_ms = int(pending[0].delay * 1000) if pending else None
        return render_template(
            'forget_password.html',
            email=email,
            redirect_to=url_for('auth.login'),
            redirect_ms=redirect_ms,
            redirect_seconds=math.ceil(pending[0].delay) if pending else None,
        )

    return render_template('forget_password.html')
