"""Declarative base shared by every ORM entity."""
from sqlalchemy.orm import declarative_base

Base = declarative_base()
