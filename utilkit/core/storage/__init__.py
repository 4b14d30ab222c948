"""
Storage module для utilkit: файловые операции с UTF-8 текстом.
"""

from utilkit.core.storage.file_io import (
    append_to_file,
    read_file,
    write_file,
)

__all__ = [
    "append_to_file",
    "read_file",
    "write_file",
]
