# -*- coding: utf-8 -*-
"""
Database Tables Initialization Script

회원/가게/상품/주문/결제 테이블을 생성합니다.
"""

import asyncio
import logging

from sqlalchemy import inspect

from src.adapters.database.connection import Base, close_db, engine, init_db
from src.settings.config import settings
from src.settings.logging_config import setup_logging

logger = logging.getLogger(__name__)


async def main():
    """테이블 초기화 실행"""
    setup_logging()
    logger.info(f"[InitDB] {settings.app_name} v{settings.app_version} ({settings.env})")

    try:
        await init_db()
        logger.info(f"[InitDB] Registered tables: {sorted(Base.metadata.tables)}")

        # 생성된 테이블 확인 (DB 종류와 무관하게 inspector 사용)
        async with engine.connect() as conn:
            tables = await conn.run_sync(lambda sync_conn: inspect(sync_conn).get_table_names())

        if tables:
            logger.info(f"[InitDB] {len(tables)} tables present: {', '.join(sorted(tables))}")
        else:
            logger.warning("[InitDB] No tables were created")

    except Exception as e:
        logger.error(f"[InitDB] Initialization failed: {e}")
        raise
    finally:
        await close_db()


if __name__ == "__main__":
    asyncio.run(main())
