from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, object_session, sessionmaker, Session

Base = declarative_base()


class Database:
    def __init__(self, connection_string, echo=False):
        self.engine = create_engine(connection_string, echo=echo)

    def create_all(self):
        Base.metadata.create_all(self.engine)

    def create_session(self) -> Session:
        session = sessionmaker(
            autoflush=False,
            expire_on_commit=False,
            bind=self.engine)
        return session()


def registry_of(entity):
    """
	Returns the registry whose session `entity` is attached to, or None.
	"""
    session = object_session(entity)
    if session is None:
        return None
    return session.info.get("registry")
