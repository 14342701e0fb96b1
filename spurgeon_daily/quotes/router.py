# spurgeon_daily/quotes/router.py
from typing import Annotated

from fastapi import APIRouter, Depends

from spurgeon_daily.deps import get_quote_service

from .selector import QuoteService
from .taxonomy import get_taxonomy

router = APIRouter(prefix="/quotes", tags=["quotes"])

Service = Annotated[QuoteService, Depends(get_quote_service)]


@router.get("/exits")
def quote_exits():
    """Public taxonomy so clients know how to handle recovered failures."""
    return {"exits": get_taxonomy()}


@router.get("/config")
def quote_config(service: Service):
    """Reflect the active selection configuration (read-only)."""
    return {
        "resource": service.resource.name,
        "encoding": service.encoding,
        "attribution": service.attribution,
        "timezone": str(service.tz) if service.tz else "local",
        "index_mode": service.index_mode,
        "out_of_range": service.out_of_range,
        "entries": len(service.quotes()),
    }
