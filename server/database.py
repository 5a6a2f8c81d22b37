# server/database.py

import logging
from pathlib import Path
from sqlalchemy import create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from server.core import config
from server.core.security import get_password_hash
from server.models import Base, User


logger = logging.getLogger(__name__)


def _make_engine(url: str):
    connect_args = {}
    if url.startswith("sqlite"):
        connect_args["check_same_thread"] = False
        database = make_url(url).database
        if database and database != ":memory:":
            Path(database).parent.mkdir(parents=True, exist_ok=True)
    return create_engine(url, connect_args=connect_args)


engine = _make_engine(config.DATABASE_URL)

SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine
)


def create_admin_user(db) -> bool:
    """
    Creates the bootstrap admin account if it does not exist yet.
    Returns True when a new account was written.
    """
    if db.query(User).filter(User.username == config.ADMIN_USERNAME).first():
        return False
    db.add(User(
        username=config.ADMIN_USERNAME,
        hashed_password=get_password_hash(config.ADMIN_PASSWORD),
        role=config.ADMIN_ROLE,
    ))
    db.commit()
    logger.info("Admin user created")
    return True


def init_db():
    if not config.SECRET_KEY:
        logger.error("JWT_SECRET_KEY is not set; refusing to start")
        raise RuntimeError("JWT_SECRET_KEY must be set to sign access tokens.")
    try:
        Base.metadata.create_all(bind=engine)
        db = SessionLocal()
        try:
            create_admin_user(db)
        finally:
            db.close()
    except SQLAlchemyError as e:
        logger.error("Database connection error: %s", e)
        raise
    logger.info("Database connected successfully")


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
