"""
Database initialization script.
"""
from backpacker.core.config import settings
from backpacker.core.logging_config import setup_logging
from backpacker.db.session import build_engine, init_db
import logging

logger = logging.getLogger(__name__)

if __name__ == "__main__":
    setup_logging(settings.LOG_LEVEL)
    logger.info("Initializing database...")
    engine = build_engine(settings)
    init_db(engine)
    engine.dispose()
    logger.info("Database initialized successfully!")
