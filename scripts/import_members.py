# scripts/import_members.py
#
# Seed the member table from a CSV file (nro_afiliado, nombre_completo, dni).
# Does nothing if the table already has members.
#
#   python scripts/import_members.py [path/to/afiliados.csv]

import sys
from pathlib import Path

# Ensure project root is on the path when running this script directly
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

import asyncio
import logging
from member_registry.application.seed_importer import SeedImporter
from member_registry.config.logging import configure_logging
from member_registry.config.settings import get_settings
from member_registry.infrastructure.database.member_repository_db import DbMemberRepository
from member_registry.infrastructure.database.session import (
    get_engine,
    get_sessionmaker,
    init_models,
)


async def import_members(source: str):
    await init_models(get_engine())
    async with get_sessionmaker()() as session:
        importer = SeedImporter(DbMemberRepository(session), logging.getLogger("seed"))
        report = await importer.run(source)
    await get_engine().dispose()

    if report.skipped_existing:
        print("Member table already has data; nothing imported.")
    elif report.source_missing:
        print("Source not found or unreadable:", source)
    else:
        print(
            f"Read {report.rows_read} rows, {report.rows_valid} complete, "
            f"{report.rows_inserted} inserted."
        )


settings = get_settings()
configure_logging(settings.log_level)
asyncio.run(import_members(sys.argv[1] if len(sys.argv) > 1 else settings.seed_csv_path))
