"""Incremental M3U/M3U8 playlist parser."""

import logging
from typing import Any, Optional

from mediastream.config import ParserConfig
from mediastream.errors import (
    MissingDuration,
    NotAPlaylist,
    PlaylistIOError,
    UnexpectedEOF,
)
from mediastream.models import Media, Playlist
from mediastream.utils.parsing import parse_attributes, parse_duration, split_directive

logger = logging.getLogger("mediastream.parser")

EXTM3U = "#EXTM3U"

# Directive names, without the leading '#'
EXTINF = "EXTINF"
PLAYLIST = "PLAYLIST"


class Parser:
    """Parse an M3U/M3U8 document from a line-readable stream.

    The stream can be anything with a ``readline()`` method returning
    ``str`` or ``bytes`` (open files, ``io.StringIO``, sockets wrapped with
    ``makefile()``...). Lines are pulled one at a time, so ``parse()`` can
    be called again later to pick up lines appended to the stream.

    Example:
        >>> import io
        >>> parser = Parser(io.StringIO(
        ...     '#EXTM3U x-tvg-url="test"\\n'
        ...     '#EXTINF:1 tvg-id="a" provider-type="iptv",A\\n'
        ...     'http://example.com/A.m3u8\\n'
        ... ))
        >>> parser.parse()
        >>> playlist = parser.take_playlist()
        >>> playlist.entries[0].name
        'A'
    """

    def __init__(self, reader: Any, config: Optional[ParserConfig] = None):
        """Initialize parser over a stream."""
        self._reader = reader
        self.config = config or ParserConfig()
        self._playlist = Playlist()
        self._media = Media()
        self._header_parsed = False

    @property
    def reader(self) -> Any:
        """The underlying stream."""
        return self._reader

    @property
    def pending(self) -> Media:
        """Entry being built from directives seen since the last location line."""
        return self._media

    @property
    def header_parsed(self) -> bool:
        return self._header_parsed

    def parse(self) -> None:
        """Consume lines from the stream until it is exhausted.

        The ``#EXTM3U`` header is only read on the first successful call.
        Entries accumulate until they are retrieved with ``take_playlist()``.

        Raises:
            UnexpectedEOF: The stream had no lines at all
            NotAPlaylist: The first line isn't an ``#EXTM3U`` header
            MissingDuration: An ``#EXTINF`` directive has no valid duration
            PlaylistIOError: Reading from the stream failed
        """
        if not self._header_parsed:
            self._parse_header()

        count = 0
        while (line := self._next_line()) is not None:
            if line.startswith("#"):
                self._parse_directive(line)
            else:
                self._finish_media(line)
                count += 1

        logger.info(f"Parsed {count} entries ({len(self._playlist.entries)} in playlist)")

    def take_playlist(self) -> Playlist:
        """Return the parsed playlist and start accumulating a new one.

        An entry that is still missing its location line stays pending and
        ends up in the next playlist.
        """
        playlist, self._playlist = self._playlist, Playlist()
        if self._media != Media():
            logger.debug("Entry without location kept pending across retrieval")
        return playlist

    def _next_line(self) -> Optional[str]:
        """Read the next non-blank line, stripped, or None at end of stream."""
        while True:
            try:
                line = self._reader.readline()
                if isinstance(line, bytes):
                    line = line.decode(self.config.encoding, self.config.decode_errors)
            except (OSError, UnicodeDecodeError) as e:
                logger.debug(f"Failed to read from stream: {e}")
                raise PlaylistIOError(e) from e

            if not line:
                return None

            line = line.strip()
            if line:
                return line

    def _parse_header(self) -> None:
        first_line = self._next_line()
        if first_line is None:
            raise UnexpectedEOF()

        # Byte order mark left over from editors saving as "UTF-8 with BOM"
        first_line = first_line.lstrip("\ufeff")
        if not first_line.startswith(EXTM3U):
            logger.debug(f"Missing {EXTM3U} header, got: {first_line[:40]!r}")
            raise NotAPlaylist()

        attributes = parse_attributes(first_line[len(EXTM3U):].lstrip())
        self._playlist.attributes.update(attributes)
        self._header_parsed = True
        logger.debug(f"Parsed header with {len(attributes)} attributes")

    def _parse_directive(self, line: str) -> None:
        key, value = split_directive(line)

        if key == EXTINF:
            self._parse_media_info(value or "")
        elif key == PLAYLIST:
            self._playlist.title = value or ""
        else:
            self._media.extension_data[key] = value

    def _parse_media_info(self, value: str) -> None:
        """Handle ``#EXTINF:<duration>[ <attributes>],<title>``."""
        duration_and_attributes, sep, title = value.partition(",")
        self._media.name = title if sep else None

        duration, _, attributes = duration_and_attributes.partition(" ")
        try:
            self._media.duration = parse_duration(duration)
        except ValueError:
            logger.debug(f"Invalid #EXTINF duration: {duration!r}")
            raise MissingDuration() from None

        if attributes:
            self._media.attributes.update(parse_attributes(attributes))

    def _finish_media(self, location: str) -> None:
        media, self._media = self._media, Media()
        media.location = location
        self._playlist.entries.append(media)
        logger.debug(f"Parsed entry: {media}")
