"""mediastream - M3U/M3U8 playlist parser."""

__version__ = "0.1.0"

from mediastream.errors import (
    MissingDuration,
    NotAPlaylist,
    ParseError,
    PlaylistIOError,
    UnexpectedEOF,
)
from mediastream.models import Media, Playlist
from mediastream.parser import Parser
from mediastream.loader import load_playlist, loads
from mediastream.utils.parsing import parse_attributes

__all__ = [
    "Parser",
    "Playlist",
    "Media",
    "ParseError",
    "NotAPlaylist",
    "UnexpectedEOF",
    "MissingDuration",
    "PlaylistIOError",
    "load_playlist",
    "loads",
    "parse_attributes",
]
