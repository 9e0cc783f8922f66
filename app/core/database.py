"""Database engine and session management."""

from sqlalchemy import Engine, create_engine, text
from sqlalchemy.orm import Session, sessionmaker


def build_engine(url: str, echo: bool = False) -> Engine:
    """Create an engine for url; SQLite connections are shared across request threads."""
    connect_args = {"check_same_thread": False} if url.startswith("sqlite") else {}
    return create_engine(
        url,
        pool_pre_ping=True,
        echo=echo,
        connect_args=connect_args,
    )


def build_session_factory(engine: Engine) -> sessionmaker[Session]:
    """Session factory bound to engine; one per process."""
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


def init_db(bind: Engine) -> None:
    """Create the users table if it does not exist yet. No migrations are run."""
    from app.models import Base

    Base.metadata.create_all(bind=bind)


def check_db_connected(db: Session) -> bool:
    """Run a trivial query to verify the database is reachable."""
    try:
        db.execute(text("SELECT 1"))
        return True
    except Exception:
        return False
