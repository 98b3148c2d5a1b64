"""Storefront: CRUD backend for users, products and orders."""

__version__ = "0.1.0"
