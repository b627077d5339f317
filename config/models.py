"""
SQLAlchemy ORM Models
"""

from sqlalchemy import Column, Integer, String, DateTime, CheckConstraint
from sqlalchemy.orm import declarative_base
from sqlalchemy.sql import func

Base = declarative_base()

class User(Base):
    __tablename__ = 'users'
    __table_args__ = (
        CheckConstraint("profile_completion BETWEEN 0 AND 100", name="ck_users_profile_completion"),
    )

    user_id = Column(Integer, primary_key=True)
    email = Column(String, unique=True, nullable=False)
    password = Column(String, nullable=False)  # Stored exactly as submitted
    name = Column(String, nullable=False, default='')
    join_date = Column(String, default='Jan 2024')
    profile_completion = Column(Integer, default=75)
    created_at = Column(DateTime, server_default=func.now())
