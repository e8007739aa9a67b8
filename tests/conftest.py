import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from volleytrack.main import app
from volleytrack.database import init_db


@pytest_asyncio.fixture(autouse=True)
async def setup_db():
    """Initialize database before each test."""
    await init_db("sqlite+aiosqlite:///:memory:")
    yield


@pytest_asyncio.fixture
async def client():
    """Async HTTP client for API tests."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def athlete():
    return {"X-User-Id": "athlete-1"}


@pytest_asyncio.fixture
async def category(client):
    """A category with three exercises, in insertion order."""
    response = await client.post("/api/admin/workout-categories", json={
        "name": "Jumping",
        "focusArea": "Lower Body Power",
        "keyObjective": "Increase explosive jumping ability",
    })
    data = response.json()
    for name in ("Box Jumps", "Depth Jumps", "Approach Jumps"):
        await client.post(f"/api/admin/workout-categories/{data['id']}/exercises", json={
            "name": name, "sets": 3, "repetitions": "8-10", "difficulty": "medium",
        })
    response = await client.get(f"/api/admin/workout-categories/{data['id']}")
    return response.json()
