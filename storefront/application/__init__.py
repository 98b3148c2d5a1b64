"""
Application layer.

Use-case services and the repository ports they depend on. Services
validate request shape and orchestrate repository calls; they never touch a
concrete database.
"""
