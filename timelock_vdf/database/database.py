from typing import Any, Optional

from sqlalchemy import create_engine, Engine
from sqlalchemy.orm import declarative_base, sessionmaker

from ..utils.EnvironmentManager import EnvironmentManager, EnvironmentVariables

# Global variable to hold the singleton engine
_engine: Optional[Engine] = None


def get_engine() -> Engine:
    """
    Creates and returns a singleton SQLAlchemy engine connected to DATABASE_URL.

    :return: SQLAlchemy Engine instance.
    :rtype: sqlalchemy.engine.Engine
    """
    global _engine
    if _engine is None:
        _engine = create_engine(EnvironmentManager.get_string(EnvironmentVariables.DATABASE_URL))
    return _engine


def set_engine(engine: Optional[Engine]) -> None:
    """Replace the singleton engine; None makes the next get_engine() reconnect."""
    global _engine
    _engine = engine


Base = declarative_base()  # Single instance of Base


def get_orm_base():
    return Base


def initialize_db() -> None:
    """Create every table that does not exist yet."""
    Base.metadata.create_all(get_engine())


def save_instance(instance: Any) -> None:
    """
    Save an instance of an ORM model to the database.

    :param instance: The ORM model instance to save.
    """
    Session = sessionmaker(bind=get_engine(), expire_on_commit=False)
    session = Session()

    try:
        session.add(instance)
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()

