from litestar.openapi.config import OpenAPIConfig
from litestar.openapi.plugins import RapidocRenderPlugin

from kycportal.__about__ import __version__ as current_version
from kycportal.config import get_settings

settings = get_settings()
config = OpenAPIConfig(
    title=settings.app.NAME,
    description="KYC document compliance tracking for a portfolio of companies",
    version=current_version,
    path="/docs",
    use_handler_docstrings=True,
    render_plugins=[RapidocRenderPlugin()],
)
"""OpenAPI config for kycportal."""
