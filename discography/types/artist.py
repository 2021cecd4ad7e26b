import sqlalchemy as sa

from ..database import Base, registry_of
from .song import Song


class DetachedArtistError(RuntimeError):
    pass


class Artist(Base):
    """
	The "has many" end of the artist/song relationship.

	An artist stores no songs. `songs()` is derived every time from the
	registry it is attached to, by filtering on `Song.artist`.
	"""
    __tablename__ = "artists"
    id = sa.Column(sa.Integer, primary_key=True)
    name = sa.Column(sa.Text, nullable=False)

    def __init__(self, name, registry=None):
        super().__init__(name=name)
        if registry is not None:
            registry.attach(self)

    def songs(self):
        registry = registry_of(self)
        if registry is None:
            return []
        return registry.songs_by(self)

    def add_song(self, song):
        song.set_artist(self)

    def add_song_by_attributes(self, name, genre):
        registry = registry_of(self)
        if registry is None:
            raise DetachedArtistError(f"Artist {self.name!r} is not attached to a registry")
        song = Song(name, genre, registry)
        self.add_song(song)
        return song

    def song_count(self):
        return len(self.songs())

    def genres(self):
        return list(dict.fromkeys(s.genre for s in self.songs()))

    def json(self):
        return dict(
            id=self.id,
            name=self.name,
            songs=[s.name for s in self.songs()],
        )

    def __str__(self):
        return self.name
