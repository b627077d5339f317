"""
Account storage: creation, lookup, credential checks and password updates.
"""

import pytest

from webapp.services.identity_store import SqlIdentityStore


def test_create_and_lookup_user(db):
    user_id = db.create_user('liam@jewelmart.example', 'goldring42', 'Liam Chen', 'Jun 2024', 60)

    account = db.get_user_by_email('liam@jewelmart.example')
    assert account['user_id'] == user_id
    assert account['name'] == 'Liam Chen'
    assert account['join_date'] == 'Jun 2024'
    assert account['profile_completion'] == 60
    assert 'password' not in account


def test_duplicate_email_is_rejected(db):
    assert db.create_user('liam@jewelmart.example', 'a', 'Liam') is not None
    assert db.create_user('liam@jewelmart.example', 'b', 'Other Liam') is None
    assert db.get_stored_password('liam@jewelmart.example') == 'a'


def test_lookup_is_exact_match(db):
    db.create_user('liam@jewelmart.example', 'a', 'Liam')
    assert db.get_user_by_email('nobody@jewelmart.example') is None
    assert db.get_user_by_email('LIAM@jewelmart.example') is None


def test_verify_credentials(db):
    db.create_user('liam@jewelmart.example', 'goldring42', 'Liam')
    assert db.verify_user_credentials('liam@jewelmart.example', 'goldring42')['name'] == 'Liam'
    assert db.verify_user_credentials('liam@jewelmart.example', 'wrong') is None


def test_update_password(db):
    db.create_user('liam@jewelmart.example', 'goldring42', 'Liam')

    assert db.update_user_password('liam@jewelmart.example', 'newpass') is True
    assert db.get_stored_password('liam@jewelmart.example') == 'newpass'
    assert db.update_user_password('nobody@jewelmart.example', 'newpass') is False


def test_seed_demo_accounts(db):
    db.init_database(seed_demo=True)
    db.init_database(seed_demo=True)
    for demo in db.DEMO_USERS:
        assert db.get_user_by_email(demo['email'])['name'] == demo['name']


def test_sql_identity_store(db):
    db.create_user('liam@jewelmart.example', 'goldring42', 'Liam')
    store = SqlIdentityStore()

    assert store.find_by_email('liam@jewelmart.example')['email'] == 'liam@jewelmart.example'
    assert store.find_by_email('nobody@jewelmart.example') is None
    assert store.update_password('liam@jewelmart.example', 'p1')
    assert store.verify_credentials('liam@jewelmart.example', 'p1')


def test_out_of_range_profile_completion_is_rejected(db):
    assert db.create_user('zed@jewelmart.example', 'pw', 'Zed', 'May 2024', 150) is None
    assert db.create_user('zed@jewelmart.example', 'pw', 'Zed', 'May 2024', -1) is None
    assert db.get_user_by_email('zed@jewelmart.example') is None


def test_check_constraint_blocks_direct_inserts(db):
    from sqlalchemy.exc import IntegrityError
    from config.models import User

    session = db.get_db_session()
    try:
        session.add(User(email='zed@jewelmart.example', password='pw', name='Zed', profile_completion=150))
        with pytest.raises(IntegrityError):
            session.commit()
        session.rollback()
    finally:
        session.close()
