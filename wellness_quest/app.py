"""Composition root: wires config, logging, storage and the session service"""
import logging
from pathlib import Path
from typing import Optional

from wellness_quest import config
from wellness_quest.services.progress_service import ProgressService
from wellness_quest.storage.state_store import JsonFileStore, StateRepository

logger = logging.getLogger(__name__)


def configure_logging(level: Optional[str] = None) -> None:
    """Configure root logging the same way for every entry point"""
    logging.basicConfig(
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        level=getattr(logging, (level or config.LOG_LEVEL).upper())
    )


def create_service(
    data_path: Optional[Path] = None,
    storage_key: Optional[str] = None,
    today: Optional[str] = None
) -> ProgressService:
    """
    Build a started ProgressService backed by a JSON file

    Args:
        data_path: Directory for the state file (defaults to DATA_PATH)
        storage_key: State key / file stem (defaults to STATE_STORAGE_KEY)
        today: Override "today" (YYYY-MM-DD), mainly for tests

    Raises:
        ConfigurationError: If the environment configuration is invalid
    """
    config.validate_config()
    configure_logging()

    store = JsonFileStore(data_path or config.DATA_PATH)
    repository = StateRepository(store, key=storage_key or config.STATE_STORAGE_KEY)
    service = ProgressService(repository, timezone=config.USER_TIMEZONE)

    logger.info(f"Loading progress from {store.get_path(repository.key)}")
    service.start(today)
    return service
