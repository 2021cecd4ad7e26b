from .registry import Registry
from .types import Artist, Song, NoArtistError, DetachedArtistError
