"""Declarative base shared by every tyre service table."""
from sqlalchemy import Column, Integer
from sqlalchemy.orm import declarative_base

base = declarative_base()


class BaseModel(base):
    """Abstract parent giving each table its integer ``id_key`` primary key."""

    __abstract__ = True

    id_key = Column(Integer, primary_key=True, autoincrement=True)
