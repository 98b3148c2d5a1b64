"""
Infrastructure layer.

Adapters around the application ports: SQLAlchemy repositories and their
error classification, the FastAPI routers with their schemas, and the
dependency container that wires a request's session into the services.
"""
