"""
Domain layer.

Plain data definitions for users, products and orders, their field
invariants, and the error taxonomy shared by every layer above. It has no
dependencies on storage or transport.
"""
