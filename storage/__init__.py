"""Storage module for reading and writing message files."""

from storage.files import read_message_from_file, write_message_to_file

__all__ = [
    'read_message_from_file',
    'write_message_to_file',
]
