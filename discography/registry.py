import logging

from . import config
from .database import Database, registry_of
from .types import Artist, Song

L = logging.getLogger("discography.registry")


class Registry:
    """
	Append-only, insertion-ordered record of every song constructed against it.

	Each registry owns its own database session; songs are never removed
	and their `id` is their position in registration order.
	"""

    def __init__(self, database=None):
        if database is None:
            database = Database(config.database_url, echo=config.database_echo)
        database.create_all()
        self.database = database
        self.session = database.create_session()
        self.session.info["registry"] = self

    @staticmethod
    def of(entity):
        return registry_of(entity)

    def register(self, song: Song):
        if song in self.session:
            return
        self.session.add(song)
        self.session.flush()
        L.debug(f"Registered song #{song.id} {song.name!r}")

    def attach(self, artist: Artist):
        if artist in self.session:
            return
        self.session.add(artist)
        self.session.flush()
        L.debug(f"Attached artist #{artist.id} {artist.name!r}")

    def all(self):
        self.session.flush()
        return self.session.query(Song).order_by(Song.id).all()

    def songs_by(self, artist: Artist):
        if registry_of(artist) is not self:
            return []
        self.session.flush()
        return (self.session.query(Song)
                .filter(Song.artist == artist)
                .order_by(Song.id)
                .all())

    def artists(self):
        self.session.flush()
        return self.session.query(Artist).order_by(Artist.id).all()

    def close(self):
        self.session.close()

    def __len__(self):
        self.session.flush()
        return self.session.query(Song).count()

    def __iter__(self):
        return iter(self.all())

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        try:
            if exc_type is None:
                self.session.commit()
            else:
                self.session.rollback()
        finally:
            self.close()
