from .artist import Artist, DetachedArtistError
from .song import Song, NoArtistError
