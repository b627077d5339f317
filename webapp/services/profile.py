"""
Profile View Model

Decides whose details the profile dashboard shows and handles the account
actions offered there.
"""

import logging
from dataclasses import dataclass

from src.models.identity import Identity, GUEST_IDENTITY
from webapp.services.errors import IdentityParseError
from webapp.services.navigation import LOGIN_PATH, PASSWORD_RESET_PATH, PRODUCTS_PATH

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EmptySection:
    """A dashboard panel that has nothing to list yet."""

    title: str
    empty_text: str
    action_label: str
    action_path: str = None


DASHBOARD_SECTIONS = (
    EmptySection("My Orders", "You haven't placed any orders yet.", "Browse Products", PRODUCTS_PATH),
    EmptySection("My Wishlist", "Your wishlist is currently empty.", "Add Your Favorites", PRODUCTS_PATH),
    EmptySection("Saved Addresses", "No address added yet.", "Add New Address"),
)


class ProfileViewModel:
    """
    Resolves the effective identity from, in order: the stored session
    marker, an identity handed in by the caller, the guest default.

    A stored marker that cannot be parsed resolves to the guest default,
    not to the injected identity.
    """

    def __init__(self, session_state, navigate, identity=None):
        self.session_state = session_state
        self.navigate = navigate
        self.injected_identity = identity
        self.identity = self._resolve_identity()

    def _resolve_identity(self):
        raw = self.session_state.read_identity()
        if raw is not None:
            try:
                return Identity.from_json(raw)
            except IdentityParseError as e:
                logger.error(f"Error parsing stored user data: {e.message}")
                return GUEST_IDENTITY
        if self.injected_identity is not None:
            return self.injected_identity
        return GUEST_IDENTITY

    @property
    def avatar_initial(self):
        return self.identity.avatar_initial

    @property
    def sections(self):
        return DASHBOARD_SECTIONS

    def logout(self):
        """Drop the session marker, show the guest identity, go to login."""
        self.session_state.clear()
        self.identity = GUEST_IDENTITY
        logger.info("User logged out")
        self.navigate(LOGIN_PATH)

    def go_to_password_reset(self):
        self.navigate(PASSWORD_RESET_PATH)
