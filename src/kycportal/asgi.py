# pylint: disable=[invalid-name,import-outside-toplevel]
# SPDX-FileCopyrightText: 2024-present KYC Portal contributors
#
# SPDX-License-Identifier: MIT
from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID

import structlog

if TYPE_CHECKING:
    from litestar import Litestar

logger = structlog.get_logger()


def create_app() -> Litestar:
    """Create ASGI application."""

    from litestar import Litestar

    from kycportal.config import app as config
    from kycportal.config.base import get_settings
    from kycportal.lib.dependencies import create_collection_dependencies
    from kycportal.server import openapi, plugins, routers

    settings = get_settings()

    return Litestar(
        cors_config=config.cors,
        compression_config=config.compression,
        dependencies=create_collection_dependencies(),
        debug=settings.app.DEBUG,
        openapi_config=openapi.config,
        route_handlers=routers.route_handlers,
        signature_types=[UUID],
        plugins=[
            plugins.structlog,
            plugins.alchemy,
            plugins.granian,
        ],
        request_max_body_size=52_428_800,  # 50 MB in bytes
    )


app = create_app()
