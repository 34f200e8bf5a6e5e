"""Process-wide acronym repository snapshot."""

import logging
import threading
from pathlib import Path

from tmdr.acronyms.repository import AcronymRepository
from tmdr.config import settings

logger = logging.getLogger(__name__)

# Global repository snapshot; replaced whole, never mutated
_repository: AcronymRepository | None = None
_lock = threading.Lock()


def load_repository(
    path: Path | str | None = None,
    delimiter: str | None = None,
) -> AcronymRepository:
    """
    Load a repository from disk without touching the global snapshot.

    Args:
        path: CSV path, defaults to the configured dataset
        delimiter: Definition separator, defaults to config

    Returns:
        AcronymRepository instance

    Raises:
        DatasetLoadError: If the dataset cannot be loaded
    """
    return AcronymRepository.from_csv(
        path or settings.dataset_path,
        delimiter=delimiter or settings.delimiter,
    )


def get_repository() -> AcronymRepository:
    """
    Get the global repository instance.

    Loads the configured dataset on first access.
    """
    global _repository

    with _lock:
        if _repository is None:
            _repository = load_repository()
        return _repository


def reload_repository(path: Path | str | None = None) -> AcronymRepository:
    """
    Build a fresh repository and swap it in as the global snapshot.

    Readers holding the previous snapshot keep using it unchanged. If
    loading fails the current snapshot stays in place.
    """
    global _repository

    repository = load_repository(path)
    with _lock:
        _repository = repository
    logger.info(f"Reloaded acronym repository ({len(repository)} entries)")
    return repository


def reset_repository() -> None:
    """
    Reset the global repository instance.

    Useful for testing or when configuration changes.
    """
    global _repository
    with _lock:
        _repository = None
