"""
Flask Application Factory

Creates and configures the Flask application instance.
"""

import logging
from datetime import datetime

from flask import Flask, g, request, current_app
from sqlalchemy import text

from config.database import configure_database, init_database, get_db_session
from src.utils.config import Config
from webapp.services.identity_store import SqlIdentityStore
from webapp.services.navbar import presentation_mode, navbar_links
from webapp.services.session_state import SessionState, FlaskSessionSource

logger = logging.getLogger(__name__)


def get_identity_store():
    """Identity store registered on the running app."""
    return current_app.extensions['identity_store']


def create_app(config_object=Config, identity_store=None, session_source=None):
    """
    Create and configure the Flask application.

    Args:
        config_object: Settings class loaded with ``app.config.from_object``
        identity_store: Replacement for the database-backed identity store
        session_source: Replacement for the cookie session (get/set/delete)
    """
    app = Flask(__name__)
    app.config.from_object(config_object)

    logging.basicConfig(level=app.config.get('LOG_LEVEL', 'INFO'))

    configure_database(app.config['DATABASE_URL'])
    init_database()

    app.extensions['identity_store'] = identity_store or SqlIdentityStore()
    app.extensions['session_source'] = session_source or FlaskSessionSource()

    @app.before_request
    def load_session_state():
        """Re-read the login marker on every navigation."""
        g.session_state = SessionState(
            app.extensions['session_source'],
            max_age=app.config.get('SESSION_MAX_AGE'),
        )
        g.is_logged_in = g.session_state.is_logged_in()

    @app.context_processor
    def inject_navbar():
        threshold = app.config['NAVBAR_SCROLL_THRESHOLD']
        is_logged_in = g.get('is_logged_in', False)
        return {
            'is_logged_in': is_logged_in,
            'nav_links': navbar_links(is_logged_in),
            'nav_mode': presentation_mode(request.path, 0, threshold),
            'nav_threshold': threshold,
        }

    @app.route('/health')
    def health():
        """Health check endpoint for the storefront and its database."""
        session = get_db_session()
        try:
            session.execute(text('SELECT 1'))
            return {
                'status': 'ok',
                'timestamp': datetime.now().isoformat()
            }
        except Exception as e:
            logger.error(f"Health check failed: {e}")
            return {
                'status': 'error',
                'message': str(e)
            }, 500
        finally:
            session.close()

    from webapp.routes.auth import auth_bp
    from webapp.routes.storefront import storefront_bp
    app.register_blueprint(auth_bp)
    app.register_blueprint(storefront_bp)

    return app
