from __future__ import annotations

import logging
import sys
from pathlib import Path

from loguru import logger

repo_root = Path(__file__).resolve().parents[1]
if str(repo_root) not in sys.path:
    sys.path.insert(0, str(repo_root))

from codelogics.config.app_config import AppConfig
from codelogics.utils.logger import BRIDGED_LOGGERS, InterceptHandler, setup_logging


def test_library_loggers_are_forwarded_to_loguru() -> None:
    setup_logging(AppConfig.model_validate({"log_level": "DEBUG"}))
    messages: list[str] = []
    sink_id = logger.add(messages.append, level="DEBUG", format="{message}")
    try:
        logging.getLogger("httpx").warning("upstream slow")
        logging.getLogger("httpx").info("request line")
    finally:
        logger.remove(sink_id)

    assert any("upstream slow" in message for message in messages)
    assert not any("request line" in message for message in messages)
    for name in BRIDGED_LOGGERS:
        std_logger = logging.getLogger(name)
        assert std_logger.propagate is False
        assert [type(h) for h in std_logger.handlers] == [InterceptHandler]


def test_debug_mode_lets_library_detail_through() -> None:
    setup_logging(AppConfig.model_validate({"app_debug": True}))

    assert logging.getLogger("openai").level == logging.DEBUG


def test_log_file_directory_is_created(tmp_path: Path) -> None:
    log_file = tmp_path / "logs" / "app.log"

    setup_logging(AppConfig.model_validate({"log_file": str(log_file)}))
    logger.remove()

    assert log_file.parent.is_dir()
