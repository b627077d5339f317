"""
Identity Store

Adapter exposing the account operations the storefront needs from the
database layer.
"""

from config import database


class SqlIdentityStore:
    """Identity store backed by the SQLAlchemy ``users`` table."""

    def find_by_email(self, email):
        """
        Returns:
            dict or None: The account, None if there is no single match or the lookup failed
        """
        return database.get_user_by_email(email)

    def update_password(self, email, new_password):
        """
        The password is written exactly as supplied.

        Returns:
            bool: True on success
        """
        return database.update_user_password(email, new_password)

    def verify_credentials(self, email, password):
        return database.verify_user_credentials(email, password)
