"""API configuration adapter.

The application factory stores its Settings on ``app.state``; endpoints read
them from there so each app instance (and each test) carries its own.
"""

from fastapi import Request

from authsrv_config.settings import Settings


def get_api_settings(request: Request) -> Settings:
    """Get the settings the running application was created with."""
    return request.app.state.settings
