import logging

import sqlalchemy as sa

from ..database import Base

L = logging.getLogger("discography.song")


class NoArtistError(LookupError):
    pass


class Song(Base):
    __tablename__ = "songs"
    id = sa.Column(sa.Integer, primary_key=True)
    name = sa.Column(sa.Text, nullable=False)
    genre = sa.Column(sa.Text)

    # the only place the artist/song relationship is recorded
    artist_id = sa.Column(sa.Integer,
            sa.ForeignKey("artists.id"),
            name="artist",
            index=True)
    artist = sa.orm.relationship("Artist")

    def __init__(self, name, genre, registry):
        super().__init__(name=name, genre=genre)
        registry.register(self)

    def set_artist(self, artist):
        previous = self.artist
        self.artist = artist
        if previous is not None and previous is not artist:
            L.debug(f"Moved {self.name!r} from {previous} to {artist}")
        else:
            L.debug(f"Assigned {self.name!r} to {artist}")

    def artist_name(self):
        if self.artist is None:
            raise NoArtistError(f"Song {self.name!r} has no artist")
        return self.artist.name

    def json(self):
        return dict(
            id=self.id,
            name=self.name,
            genre=self.genre,
            artist=self.artist.name if self.artist else None,
        )

    def __str__(self):
        return f"{self.name} by {self.artist}"
