"""
SQLAlchemy ORM model for the movie catalog database.

This module defines the single ``movies`` table backing the API.
"""

from typing import Optional
from sqlalchemy import Integer, Numeric, Text, UniqueConstraint
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """Base class for all ORM models."""
    pass


class Movie(Base):
    """
    Movie table storing catalog entries.
    
    Attributes:
        id: Primary key, assigned by the store
        name: Movie name (unique across the catalog)
        description: Free-text description (optional)
        duration: Running time
        price: Rental price
    """
    __tablename__ = 'movies'
    
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    # asdecimal=False so rows serialize as plain JSON numbers
    duration: Mapped[Optional[float]] = mapped_column(Numeric(asdecimal=False), nullable=True)
    price: Mapped[Optional[float]] = mapped_column(Numeric(asdecimal=False), nullable=True)
    
    __table_args__ = (
        UniqueConstraint('name', name='unique_movie_name'),
    )
    
    def __repr__(self) -> str:
        return f"<Movie(id={self.id}, name='{self.name}', duration={self.duration}, price={self.price})>"
