# -*- coding: utf-8 -*-
"""
로깅 설정 모듈

콘솔 + 회전 파일 핸들러 구성
"""

import logging
import logging.handlers
import sys
from pathlib import Path

from src.settings.config import Settings, settings

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s - %(message)s"


def setup_logging(config: Settings | None = None) -> None:
    """
    루트 로거 초기화

    Args:
        config: 사용할 설정 (없으면 전역 settings)
    """
    config = config or settings
    formatter = logging.Formatter(LOG_FORMAT)

    root_logger = logging.getLogger()
    root_logger.setLevel(config.log_level)
    root_logger.handlers = []

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if config.log_file:
        log_path = Path(config.log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.handlers.RotatingFileHandler(
            filename=log_path,
            maxBytes=config.log_max_bytes,
            backupCount=config.log_backup_count,
            encoding="utf-8",
        )
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    # SQL 로그는 database_echo 로 제어
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)
