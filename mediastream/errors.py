"""Errors raised while parsing playlists."""

from typing import Optional


class ParseError(Exception):
    """Base class for playlist parsing errors."""

    message = "Failed to parse playlist"

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.message)


class NotAPlaylist(ParseError):
    """Input doesn't start with the #EXTM3U header."""

    message = "Not a playlist file"


class UnexpectedEOF(NotAPlaylist):
    """Stream ended before the header line could be read."""

    message = "Unexpected EOF"


class MissingDuration(ParseError):
    """#EXTINF:<duration> has no usable duration."""

    message = "Duration of a media is missing"


class PlaylistIOError(ParseError):
    """Reading from the underlying stream failed."""

    def __init__(self, original: Exception):
        super().__init__(str(original) or type(original).__name__)
        self.original = original
