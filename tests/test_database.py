import pytest
from datetime import date
from sqlalchemy import text
from volleytrack.database import init_db, get_db, resolve_database_url


@pytest.mark.asyncio
async def test_init_db_creates_tables():
    await init_db("sqlite+aiosqlite:///:memory:")
    async for session in get_db():
        result = await session.execute(text("SELECT name FROM sqlite_master WHERE type='table'"))
        tables = [row[0] for row in result.fetchall()]
        assert "workout_categories" in tables
        assert "exercises" in tables
        assert "workout_plans" in tables
        assert "events" in tables
        break


@pytest.mark.asyncio
async def test_init_db_accepts_sync_sqlite_url(tmp_path):
    db_file = tmp_path / "nested" / "volleytrack.db"
    await init_db(f"sqlite:///{db_file}")
    assert db_file.parent.exists()


@pytest.mark.asyncio
async def test_category_owns_ordered_exercises():
    await init_db("sqlite+aiosqlite:///:memory:")
    from volleytrack.models import Exercise, WorkoutCategory
    async for session in get_db():
        category = WorkoutCategory(name="Setting", focus_area="Hands", key_objective="Accurate sets")
        category.exercises = [
            Exercise(name="Back Sets", sets=3, repetitions="20", difficulty="challenging", order=1),
            Exercise(name="Wall Sets", sets=3, repetitions="50", difficulty="easy", order=0),
        ]
        session.add(category)
        await session.commit()
        category_id = category.id
        break

    async for session in get_db():
        category = await session.get(WorkoutCategory, category_id)
        assert [e.name for e in category.exercises] == ["Wall Sets", "Back Sets"]
        assert category.created_at is not None
        assert len(category.id) == 16
        break


@pytest.mark.asyncio
async def test_workout_plan_model_stores_lists():
    await init_db("sqlite+aiosqlite:///:memory:")
    from volleytrack.models import WorkoutPlan
    async for session in get_db():
        plan = WorkoutPlan(
            user_id="athlete-1",
            category_id="cat-1",
            start_date=date(2030, 1, 7),
            number_of_weeks=4,
            selected_days=[1, 3],
            selected_exercise_ids=["a", "b"],
        )
        session.add(plan)
        await session.commit()
        await session.refresh(plan)
        assert plan.selected_days == [1, 3]
        assert plan.start_date == date(2030, 1, 7)
        break


@pytest.mark.parametrize("url, expected", [
    ("sqlite:///./data/dev.db", "sqlite+aiosqlite:///./data/dev.db"),
    ("sqlite+aiosqlite:///:memory:", "sqlite+aiosqlite:///:memory:"),
])
def test_resolve_database_url(url, expected):
    assert resolve_database_url(url) == expected


def test_resolve_database_url_from_environment(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "sqlite:////tmp/volleytrack.db")
    assert resolve_database_url() == "sqlite+aiosqlite:////tmp/volleytrack.db"

    monkeypatch.delenv("DATABASE_URL")
    assert resolve_database_url() == "sqlite+aiosqlite:///./data/volleytrack.db"


@pytest.mark.asyncio
async def test_file_database_is_shared_across_sessions(tmp_path):
    await init_db(f"sqlite:///{tmp_path / 'volleytrack.db'}")
    from volleytrack.models import WorkoutCategory
    async for session in get_db():
        session.add(WorkoutCategory(name="Serving", focus_area="Power", key_objective="Aces"))
        await session.commit()
        break

    async for session in get_db():
        result = await session.execute(text("SELECT name FROM workout_categories"))
        assert [row[0] for row in result.fetchall()] == ["Serving"]
        break
