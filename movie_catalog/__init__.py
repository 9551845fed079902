"""
Movie Catalog API package.

A small CRUD service over a single movies table: create, paginated list,
partial update and delete, with structural payload validation and
duplicate-name prevention.
"""

__version__ = "1.0.0"
