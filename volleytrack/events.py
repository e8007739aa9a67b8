"""Analytics event logging."""
import json

from sqlalchemy.ext.asyncio import AsyncSession

from volleytrack.models import Event, utcnow

FUNNEL = "funnel"
FEATURE = "feature"


async def log_event(session: AsyncSession, event_type: str, name: str, metadata: dict = None):
    """Log an analytics event.

    Args:
        session: SQLAlchemy AsyncSession
        event_type: 'funnel' or 'feature'
        name: Event name like 'category_created', 'workout_plan_created'
        metadata: Optional dict of additional context
    """
    session.add(Event(
        timestamp=utcnow(),
        event_type=event_type,
        name=name,
        event_metadata=json.dumps(metadata) if metadata else None,
    ))
    await session.commit()
