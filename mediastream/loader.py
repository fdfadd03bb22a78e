"""Load playlists from files and strings."""

import io
import logging
from pathlib import Path
from typing import Optional

from mediastream.config import ParserConfig
from mediastream.errors import ParseError
from mediastream.models import Playlist
from mediastream.parser import Parser

logger = logging.getLogger("mediastream.loader")


def load_playlist(
    filepath: str | Path,
    config: Optional[ParserConfig] = None
) -> Playlist:
    """Parse an M3U/M3U8 playlist file.

    The file is read in binary mode and decoded line by line using the
    configured encoding.

    Args:
        filepath: Path to the playlist file
        config: Optional parser configuration

    Returns:
        The parsed Playlist

    Raises:
        FileNotFoundError: The file doesn't exist
        ParseError: The file isn't a valid playlist
    """
    filepath = Path(filepath)

    try:
        with open(filepath, "rb") as f:
            parser = Parser(f, config)
            parser.parse()
    except FileNotFoundError:
        logger.error(f"Playlist file not found: {filepath}")
        raise
    except ParseError as e:
        logger.error(f"Error parsing playlist {filepath}: {e}")
        raise

    playlist = parser.take_playlist()
    logger.info(f"Loaded {len(playlist.entries)} entries from: {filepath}")
    return playlist


def loads(text: str, config: Optional[ParserConfig] = None) -> Playlist:
    """Parse playlist content held in memory."""
    parser = Parser(io.StringIO(text), config)
    parser.parse()
    return parser.take_playlist()
