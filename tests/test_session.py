import pytest
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.db import session as session_module
from app.models import User

pytestmark = pytest.mark.asyncio


async def test_get_session_yields_a_working_session(engine, monkeypatch):
    monkeypatch.setattr(
        session_module, "SessionLocal", session_module.async_sessionmaker(engine, expire_on_commit=False)
    )

    sessions = session_module.get_session()
    db_session = await anext(sessions)

    assert isinstance(db_session, AsyncSession)
    assert (await db_session.scalars(select(User))).all() == []

    await sessions.aclose()


async def test_default_session_factory_keeps_objects_loaded_after_commit():
    assert session_module.SessionLocal.kw["expire_on_commit"] is False
