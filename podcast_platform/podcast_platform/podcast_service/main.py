"""
Service wiring for the podcast platform.

The transport layer calls ``bootstrap()`` once on startup and builds the
services per request around a database session from ``get_db()``.
"""
from sqlalchemy.orm import Session
import logging

from .accounts import AccountService
from .auth import JwtOptions, JwtService
from .config import Settings, settings, validate_runtime_config
from .db import init_db
from .podcasts import CatalogService
from .repositories import SqlAlchemyPodcastRepository, SqlAlchemyUserRepository
from .utils.event_logger import configure_logging

logger = logging.getLogger(__name__)


def bootstrap(config: Settings = settings) -> None:
    configure_logging(config.LOG_LEVEL, config.LOG_DIR)
    validate_runtime_config(config)
    init_db()
    logger.info(f"Podcast service started (env={config.APP_ENV})")


def build_jwt_service(config: Settings = settings) -> JwtService:
    return JwtService(JwtOptions(private_key=config.JWT_PRIVATE_KEY))


def build_account_service(db: Session, config: Settings = settings) -> AccountService:
    return AccountService(SqlAlchemyUserRepository(db), build_jwt_service(config))


def build_catalog_service(db: Session) -> CatalogService:
    return CatalogService(SqlAlchemyPodcastRepository(db))
