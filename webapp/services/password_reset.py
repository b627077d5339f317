"""
Password Reset Flow

Validates the reset form, looks the account up by email, overwrites its
password and, once that succeeds, schedules the redirect to the login page.

The reset is authorised by the email address alone and the new password is
stored as typed. Both are known gaps, kept so the flow behaves like the
existing storefront (see DESIGN.md).
"""

import logging

from webapp.services.errors import (
    StorefrontError,
    ValidationError,
    NotFoundError,
    RemoteError,
    UnexpectedError,
)
from webapp.services.navigation import LOGIN_PATH
from webapp.services.scheduling import ThreadingScheduler

logger = logging.getLogger(__name__)

# Flow states
IDLE = "idle"
VALIDATING = "validating"
REMOTE_LOOKUP = "remote-lookup"
REMOTE_UPDATE = "remote-update"
ERROR = "error"
SUCCESS = "success"
REDIRECTED = "redirected"

ALL_FIELDS_REQUIRED = "All fields are required."
PASSWORDS_DO_NOT_MATCH = "Passwords do not match."
NO_ACCOUNT = "No account found with this email."
UPDATE_FAILED = "Failed to reset password. Please try again."
UNEXPECTED = "An unexpected error occurred. Please try again."
RESET_SUCCEEDED = "Password reset successfully! Redirecting..."

DEFAULT_REDIRECT_DELAY = 1.0


class PasswordResetFlow:
    """
    One password-reset form and its submission state.

    Args:
        store: Object with ``find_by_email(email)`` and ``update_password(email, password)``
        navigate (callable): Called with the destination path when the redirect fires
        scheduler: Object with ``call_later(delay, callback, *args)`` returning a cancellable handle
        redirect_delay (float): Seconds between success and the redirect
    """

    def __init__(self, store, navigate, scheduler=None, redirect_delay=DEFAULT_REDIRECT_DELAY):
        self.store = store
        self.navigate = navigate
        self.scheduler = scheduler or ThreadingScheduler()
        self.redirect_delay = redirect_delay

        self.state = IDLE
        self.message = None
        self.message_kind = None
        self.loading = False
        self.disposed = False
        self.redirect_handle = None

    @property
    def has_error(self):
        return self.message_kind == "error"

    def submit(self, email, password, confirm_password):
        """
        Run one reset attempt.

        Returns:
            bool: True on success, False if the submission was ignored
                because another one is in flight, or the flow was disposed
                before or during it (no redirect is armed then)

        Raises:
            ValidationError: A field is empty or the passwords differ
            NotFoundError: No account matches the email
            RemoteError: The password update failed
            UnexpectedError: Anything else went wrong
        """
        if self.disposed:
            logger.debug("Ignoring submit on a disposed reset flow")
            return False
        if self.loading:
            logger.debug("Ignoring submit while a reset is in flight")
            return False

        self.loading = True
        self._set_message(None, None)
        try:
            completed = self._run(email, password, confirm_password)
        except StorefrontError as e:
            self._fail(e)
            raise
        except Exception as e:
            logger.exception(f"Unexpected error resetting password for {email}: {e}")
            error = UnexpectedError(UNEXPECTED)
            self._fail(error)
            raise error from e
        finally:
            self.loading = False
        return completed

    def dispose(self):
        """Cancel the pending redirect; no state changes happen afterwards."""
        self.disposed = True
        if self.redirect_handle is not None:
            self.redirect_handle.cancel()

    def _run(self, email, password, confirm_password):
        self.state = VALIDATING
        if not email or not password or not confirm_password:
            raise ValidationError(ALL_FIELDS_REQUIRED)
        if password != confirm_password:
            raise ValidationError(PASSWORDS_DO_NOT_MATCH, field="confirm_password")

        self.state = REMOTE_LOOKUP
        account = self.store.find_by_email(email)
        if not account:
            logger.info(f"Password reset requested for unknown email {email}")
            raise NotFoundError(NO_ACCOUNT, email=email)

        self.state = REMOTE_UPDATE
        if not self.store.update_password(email, password):
            logger.warning(f"Password update failed for {email}")
            raise RemoteError(UPDATE_FAILED)

        if self.disposed:
            logger.info(f"Password for {email} updated after the reset flow was disposed")
            return False
        self.state = SUCCESS
        self._set_message(RESET_SUCCEEDED, "success")
        logger.info(f"Password reset for {email}")
        self.redirect_handle = self.scheduler.call_later(self.redirect_delay, self._redirect)
        return True

    def _redirect(self):
        if self.disposed:
            return
        self.state = REDIRECTED
        self.navigate(LOGIN_PATH)

    def _fail(self, error):
        if self.disposed:
            return
        self.state = ERROR
        self._set_message(error.message, "error")

    def _set_message(self, message, kind):
        self.message = message
        self.message_kind = kind
