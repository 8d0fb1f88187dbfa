"""Async file services for message input and output."""

from pathlib import Path
from typing import Union
import asyncio

from utils.logging import get_logger
from utils.exceptions import FileReadError, FileWriteError

logger = get_logger(__name__)

PathLike = Union[str, Path]


# newline='' keeps line endings byte-for-byte in both directions
def _read_text(path: Path) -> str:
    with path.open('r', encoding='utf-8', newline='') as f:
        return f.read()


def _write_text(path: Path, message: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open('w', encoding='utf-8', newline='') as f:
        f.write(message)


async def read_message_from_file(file_path: PathLike) -> str:
    """
    Read a UTF-8 message from a file.
    
    Args:
        file_path: Path of the message file
        
    Returns:
        File contents
        
    Raises:
        FileReadError: If the file cannot be read or is not valid UTF-8
    """
    path = Path(file_path)
    try:
        return await asyncio.to_thread(_read_text, path)
    except (OSError, UnicodeDecodeError) as e:
        raise FileReadError(f"Error reading file {path}: {e}") from e


async def write_message_to_file(file_path: PathLike, message: str) -> None:
    """
    Write a message to a file as UTF-8, creating parent directories.
    
    Args:
        file_path: Destination path
        message: Text to write
        
    Raises:
        FileWriteError: If the file cannot be written
    """
    path = Path(file_path)
    try:
        await asyncio.to_thread(_write_text, path, message)
    except OSError as e:
        raise FileWriteError(f"Error writing file {path}: {e}") from e
    logger.info(f"Message written to file: {path}")
