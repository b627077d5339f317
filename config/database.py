"""
Database Configuration and Management (SQLAlchemy)

Handles database setup, connections, and the account operations the
storefront consumes: lookup by email, credential checks, password updates.
"""

from pathlib import Path
import logging
from sqlalchemy import create_engine, select, update, and_
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from config.models import Base, User
from src.utils.config import Config

# Set up logging
logger = logging.getLogger(__name__)

# SQLAlchemy Engine and Session
DATABASE_URL = Config.DATABASE_URL
engine = None
SessionLocal = sessionmaker(autocommit=False, autoflush=False)

DEMO_USERS = [
    {'email': 'ava@jewelmart.example', 'password': 'sparkle123', 'name': 'Ava Patel', 'join_date': 'Mar 2024', 'profile_completion': 80},
    {'email': 'liam@jewelmart.example', 'password': 'goldring42', 'name': 'Liam Chen', 'join_date': 'Jun 2024', 'profile_completion': 60},
]

def configure_database(database_url=None):
    """
    Create the engine for the given URL and bind the session factory to it.

    Args:
        database_url (str, optional): SQLAlchemy URL, defaults to DATABASE_URL

    Returns:
        sqlalchemy.engine.Engine: The configured engine
    """
    global engine

    url = database_url or DATABASE_URL
    kwargs = {}
    if url in ('sqlite://', 'sqlite:///:memory:'):
        # One shared connection so every session sees the same in-memory data
        kwargs = {'connect_args': {'check_same_thread': False}, 'poolclass': StaticPool}
    elif url.startswith('sqlite:///'):
        Path(url[len('sqlite:///'):]).parent.mkdir(parents=True, exist_ok=True)

    if engine is not None:
        engine.dispose()
    engine = create_engine(url, echo=False, **kwargs)
    SessionLocal.configure(bind=engine)
    return engine

def get_db_session():
    """
    Get a new database session.

    Returns:
        sqlalchemy.orm.Session: Database session
    """
    if engine is None:
        configure_database()
    return SessionLocal()

def init_database(seed_demo=False):
    """
    Initialize the database with all required tables.

    Args:
        seed_demo (bool): Also insert the demo accounts if they are missing
    """
    logger.info("Initializing database...")

    if engine is None:
        configure_database()

    try:
        Base.metadata.create_all(bind=engine)

        if seed_demo:
            for demo in DEMO_USERS:
                create_user(**demo)

        logger.info("Database initialized successfully!")
    except Exception as e:
        logger.error(f"Error initializing database: {e}")
        raise

def _user_to_dict(user):
    return {
        'user_id': user.user_id,
        'email': user.email,
        'name': user.name,
        'join_date': user.join_date,
        'profile_completion': user.profile_completion,
        'created_at': user.created_at
    }

def create_user(email, password, name, join_date='Jan 2024', profile_completion=75):
    """
    Create a new user.

    Returns:
        int or None: The new user's ID, None if the email is taken, the
            profile completion is outside 0-100, or on error
    """
    if profile_completion is not None and not 0 <= profile_completion <= 100:
        logger.warning(f"Rejected user {email}: profile completion {profile_completion} is outside 0-100")
        return None

    session = get_db_session()
    try:
        existing = session.execute(select(User).where(User.email == email)).scalar_one_or_none()
        if existing:
            logger.warning(f"User with email {email} already exists")
            return None

        user = User(
            email=email,
            password=password,
            name=name,
            join_date=join_date,
            profile_completion=profile_completion
        )
        session.add(user)
        session.commit()
        logger.info(f"Created user: {email} (ID: {user.user_id})")
        return user.user_id
    except Exception as e:
        logger.error(f"Error creating user: {e}")
        session.rollback()
        return None
    finally:
        session.close()

def get_user_by_email(email):
    """
    Get the account registered under an email address.

    Args:
        email (str): Email to look up, matched exactly

    Returns:
        dict or None: Account fields (never the password), None if no single match
    """
    session = get_db_session()
    try:
        user = session.execute(select(User).where(User.email == email)).scalar_one_or_none()
        return _user_to_dict(user) if user else None
    except Exception as e:
        logger.error(f"Error fetching user {email}: {e}")
        return None
    finally:
        session.close()

def verify_user_credentials(email, password):
    """
    Check an email/password pair.

    Returns:
        dict or None: Account fields if the pair matches, None otherwise
    """
    session = get_db_session()
    try:
        user = session.execute(
            select(User).where(and_(User.email == email, User.password == password))
        ).scalar_one_or_none()
        return _user_to_dict(user) if user else None
    except Exception as e:
        logger.error(f"Error verifying credentials: {e}")
        return None
    finally:
        session.close()

def update_user_password(email, new_password):
    """
    Overwrite the password stored for an email address.

    Args:
        email (str): Account email
        new_password (str): Replacement password, written as given

    Returns:
        bool: True if exactly one account was updated
    """
    session = get_db_session()
    try:
        result = session.execute(
            update(User).where(User.email == email).values(password=new_password)
        )
        if result.rowcount != 1:
            session.rollback()
            logger.warning(f"Password update for {email} matched {result.rowcount} rows")
            return False
        session.commit()
        logger.info(f"Updated password for {email}")
        return True
    except Exception as e:
        logger.error(f"Error updating password for {email}: {e}")
        session.rollback()
        return False
    finally:
        session.close()

def get_stored_password(email):
    """Return the raw stored password for an email (maintenance scripts and tests)."""
    session = get_db_session()
    try:
        return session.execute(select(User.password).where(User.email == email)).scalar_one_or_none()
    finally:
        session.close()
