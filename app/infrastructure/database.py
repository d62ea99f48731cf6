from typing import Any, Dict, List, Optional
from loguru import logger
from app.core.config import settings


class InMemoryDatabase:
    """
    Process-wide store of named record collections.

    Stands in for a persistence backend: each collection is an ordered,
    mutable list shared by every repository that opens it.
    """

    def __init__(self):
        self._collections: Dict[str, List[Any]] = {}

    def collection(self, name: str) -> List[Any]:
        """Return the live list backing a collection, creating it on first use"""
        return self._collections.setdefault(name, [])

    def collection_names(self) -> List[str]:
        return sorted(self._collections)


_database: Optional[InMemoryDatabase] = None


def init_db(seed: Optional[bool] = None) -> InMemoryDatabase:
    """Create a fresh database, seeded with the mock data when enabled"""
    from app.infrastructure.mock_data import seed_database

    db = InMemoryDatabase()
    if settings.SEED_MOCK_DATA if seed is None else seed:
        seed_database(db)
        logger.info(
            "Mock data loaded: "
            + ", ".join(f"{name}={len(db.collection(name))}" for name in db.collection_names())
        )
    return db


def get_db() -> InMemoryDatabase:
    """Dependency to get the shared database"""
    global _database
    if _database is None:
        _database = init_db()
    return _database
