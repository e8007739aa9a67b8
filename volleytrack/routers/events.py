"""Analytics export: what admins and athletes did, in order."""
from datetime import datetime, timezone
from typing import Optional
import json

from fastapi import APIRouter, Depends
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from volleytrack.database import get_db
from volleytrack.models import Event

router = APIRouter(prefix="/api", tags=["events"])

SERVICE_NAME = "volleytrack"


@router.get("/events")
async def get_events(
    since: Optional[datetime] = None,
    event_type: Optional[str] = None,
    session: AsyncSession = Depends(get_db),
):
    """Events after ``since`` (naive UTC), optionally only one type."""
    query = select(Event).order_by(Event.timestamp, Event.id)
    if since:
        if since.tzinfo is not None:
            since = since.astimezone(timezone.utc).replace(tzinfo=None)
        query = query.where(Event.timestamp > since)
    if event_type:
        query = query.where(Event.event_type == event_type)

    rows = (await session.execute(query)).scalars().all()
    return {
        "service": SERVICE_NAME,
        "events": [
            {
                "timestamp": row.timestamp.isoformat(),
                "event_type": row.event_type,
                "name": row.name,
                "metadata": json.loads(row.event_metadata) if row.event_metadata else None,
            }
            for row in rows
        ],
    }
