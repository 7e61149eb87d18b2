# scripts/check_db.py

import sys
from pathlib import Path
from sqlalchemy import text

# Ensure project root is on the path when running this script directly
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

import asyncio
from member_registry.infrastructure.database.session import get_engine, init_models


async def check_connection():
    engine = get_engine()
    async with engine.begin() as conn:
        result = await conn.execute(text("SELECT 1"))
        print("DB Connected:", result.scalar())
    await init_models(engine)
    async with engine.connect() as conn:
        members = await conn.execute(text("SELECT COUNT(*) FROM afiliados"))
        logs = await conn.execute(text("SELECT COUNT(*) FROM logs"))
        print("afiliados:", members.scalar(), "logs:", logs.scalar())
    await engine.dispose()

asyncio.run(check_connection())
