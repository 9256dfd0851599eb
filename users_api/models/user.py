"""User model."""

from sqlalchemy import BigInteger, Column, Date, Integer, String

from .base import Base

# Ids are signed 64-bit end to end. SQLite only autoincrements an INTEGER
# primary key, so the column narrows its DDL there and nowhere else.
MAX_USER_ID = 2**63 - 1
MIN_USER_ID = -(2**63)


class User(Base):
    __tablename__ = "users"
    id = Column(BigInteger().with_variant(Integer, "sqlite"), primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    dob = Column(Date, nullable=False)
