"""
Navigation

Destination paths used across the storefront and a navigator that records
where a view asked to go, so the route handler can issue the redirect.
"""

HOME_PATH = "/"
LOGIN_PATH = "/login"
PASSWORD_RESET_PATH = "/ForgetPassword"
PROFILE_PATH = "/profile"
CART_PATH = "/cart"
PRODUCTS_PATH = "/products"
ABOUT_PATH = "/about"
CONTACT_PATH = "/contact"
POLICIES_PATH = "/policies-faq"


class Navigator:
    """Collects navigation requests in order."""

    def __init__(self):
        self.history = []

    def __call__(self, path):
        self.history.append(path)

    @property
    def target(self):
        """The most recent destination, or None if nothing navigated."""
        return self.history[-1] if self.history else None
