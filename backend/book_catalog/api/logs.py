"""Log level admin routes."""
from typing import Optional

from fastapi import APIRouter, Depends, Query
from fastapi.responses import PlainTextResponse

from book_catalog.core.logging import LogLevelRegistry
from book_catalog.dependencies import get_log_registry

router = APIRouter(prefix="/logs", tags=["Logs"])


@router.get("/level", response_class=PlainTextResponse)
async def get_log_level(
    logger_name: Optional[str] = Query(None, alias="logger-name"),
    registry: LogLevelRegistry = Depends(get_log_registry),
) -> str:
    """Current level of a logger, uppercased."""
    return registry.get_level(logger_name).name


@router.put("/level", response_class=PlainTextResponse)
async def set_log_level(
    logger_name: Optional[str] = Query(None, alias="logger-name"),
    logger_level: Optional[str] = Query(None, alias="logger-level"),
    registry: LogLevelRegistry = Depends(get_log_registry),
) -> str:
    """Set the level of a logger and echo it back."""
    return registry.set_level(logger_name, logger_level).name
