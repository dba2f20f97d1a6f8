from __future__ import annotations

import structlog
from litestar import Controller, MediaType, Response, get
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession  # noqa: TCH002

from .schemas import SystemHealth

logger = structlog.get_logger()


class SystemController(Controller):
    tags = ["System"]

    @get(operation_id="SystemHealth", name="system:health", path="/health", media_type=MediaType.JSON, cache=False)
    async def check_system_health(self, db_session: AsyncSession) -> Response[SystemHealth]:
        """Check database available and returns app config info."""
        try:
            await db_session.execute(text("select 1"))
            db_status = "online"
        except Exception:  # noqa: BLE001
            logger.warning("Database health check failed", exc_info=True)
            db_status = "offline"
        healthy = SystemHealth(database_status=db_status)  # type: ignore[arg-type]
        return Response(content=healthy, status_code=200 if db_status == "online" else 500)
