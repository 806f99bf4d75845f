from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from movie_catalog.domain.ports.repositories.movie_repository import MovieRepository
from movie_catalog.infrastructure.config.dependencies import get_movie_repository, get_settings
from movie_catalog.infrastructure.config.settings import GraphDatabaseSettings
from movie_catalog.infrastructure.logging.logger import setup_logging
from movie_catalog.infrastructure.persistence.graph_database import close_driver, create_driver, set_driver

setup_logging()


@asynccontextmanager
async def lifespan(settings: Optional[GraphDatabaseSettings] = None) -> AsyncIterator[MovieRepository]:
    settings = settings or get_settings()
    driver = create_driver(settings)
    set_driver(driver)
    try:
        yield get_movie_repository(driver=driver, settings=settings)
    finally:
        await close_driver()
