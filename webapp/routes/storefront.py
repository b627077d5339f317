"""
Storefront Routes

Catalogue placeholder pages and the customer profile dashboard.
"""

from flask import Blueprint, render_template, redirect, g

from webapp.services.navigation import Navigator
from webapp.services.profile import ProfileViewModel

storefront_bp = Blueprint('storefront', __name__)

PAGES = {
    'home': ('/', 'Jewel Mart', 'Handpicked jewellery for every occasion.'),
    'products': ('/products', 'Products', 'Our collection is coming soon.'),
    'about': ('/about', 'About', 'A family jeweller since 1998.'),
    'contact': ('/contact', 'Contact', 'Reach us at hello@jewelmart.example.'),
    'policies': ('/policies-faq', 'Policies & FAQ', 'Shipping, returns and care guides.'),
    'cart': ('/cart', 'Your Cart', 'Your cart is empty.'),
}


def _register_page(endpoint, path, title, body):
    def view():
        return render_template('page.html', title=title, body=body)

    view.__name__ = endpoint
    storefront_bp.add_url_rule(path, endpoint, view)


for _endpoint, (_path, _title, _body) in PAGES.items():
    _register_page(_endpoint, _path, _title, _body)


@storefront_bp.route('/profile')
def profile():
    """User dashboard for the effective identity."""
    view_model = ProfileViewModel(g.session_state, Navigator())
    return render_template('profile.html', profile=view_model)


@storefront_bp.route('/profile/change-password')
def change_password():
    navigator = Navigator()
    ProfileViewModel(g.session_state, navigator).go_to_password_reset()
    return redirect(navigator.target)
