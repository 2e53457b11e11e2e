"""authsrv - account and authentication backend.

Layers:
- domain: account projections, repository contracts, exceptions
- application: authentication flows, account commands and queries
- infrastructure: SQLAlchemy persistence, file storage client, email
- presentation: FastAPI app and Typer CLI
"""

__version__ = "0.1.0"
