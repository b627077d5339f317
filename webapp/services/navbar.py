"""
Navbar

Display mode and link list for the top navigation bar.

On the home page the bar starts transparent over the hero image and turns
opaque once the page scrolls past a threshold. Every other page gets the
opaque bar.
"""

from dataclasses import dataclass

from webapp.services import navigation

TRANSPARENT = "transparent"
OPAQUE = "opaque"
DEFAULT_SCROLL_THRESHOLD = 50


def presentation_mode(path, scroll_offset=0, threshold=DEFAULT_SCROLL_THRESHOLD):
    """
    Derive the navbar mode for a route and vertical scroll offset.

    Args:
        path (str): Current route path
        scroll_offset (float): Vertical scroll offset in pixels
        threshold (int): Offset the page must exceed on the home route

    Returns:
        str: TRANSPARENT or OPAQUE
    """
    if path != navigation.HOME_PATH:
        return OPAQUE
    return OPAQUE if scroll_offset > threshold else TRANSPARENT


class NavbarModeController:
    """
    Keeps the navbar mode in step with route changes and scroll events.

    The scroll listener is only attached while the home route is shown.
    """

    def __init__(self, threshold=DEFAULT_SCROLL_THRESHOLD):
        self.threshold = threshold
        self.path = None
        self.scroll_offset = 0
        self.listening = False
        self.mode = OPAQUE

    def route_changed(self, path, scroll_offset=None):
        self.path = path
        if scroll_offset is not None:
            self.scroll_offset = scroll_offset
        self.listening = path == navigation.HOME_PATH
        self.mode = presentation_mode(path, self.scroll_offset, self.threshold)
        return self.mode

    def scrolled(self, offset):
        """Handle a scroll event; ignored while detached."""
        self.scroll_offset = offset
        if self.listening:
            self.mode = presentation_mode(self.path, offset, self.threshold)
        return self.mode

    def dispose(self):
        self.listening = False


@dataclass(frozen=True)
class NavLink:
    label: str
    path: str
    icon: bool = False


def navbar_links(is_logged_in):
    """Links shown in the navbar, in display order."""
    links = [
        NavLink("Home", navigation.HOME_PATH),
        NavLink("Products", navigation.PRODUCTS_PATH),
        NavLink("About", navigation.ABOUT_PATH),
        NavLink("Contact", navigation.CONTACT_PATH),
        NavLink("Policies & FAQ", navigation.POLICIES_PATH),
    ]
    if not is_logged_in:
        links.append(NavLink("Login", navigation.LOGIN_PATH))
    links.append(NavLink("Cart", navigation.CART_PATH, icon=True))
    if is_logged_in:
        links.append(NavLink("Profile", navigation.PROFILE_PATH, icon=True))
    return links
