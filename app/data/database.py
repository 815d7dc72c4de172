# app/data/database.py
from fastapi import Request
from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker

from app.utils.settings import DATABASE_URL


def make_engine(url: str):
    connect_args = {"check_same_thread": False} if url.startswith("sqlite") else {}
    return create_engine(url, pool_pre_ping=True, connect_args=connect_args)


def make_session_factory(bind):
    return sessionmaker(bind=bind, autoflush=False, expire_on_commit=False)


engine = make_engine(DATABASE_URL)
SessionLocal = make_session_factory(engine)

Base = declarative_base()


def get_db(request: Request):
    """Sesja na czas jednego requestu, z fabryki przypietej do aplikacji."""
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()
