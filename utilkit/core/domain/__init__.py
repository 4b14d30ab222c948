"""
Domain value objects: DateDifference, FileOperation.
"""

from utilkit.core.domain.date_difference import DateDifference
from utilkit.core.domain.file_operation import FileOperation, FileOperationKind

__all__ = [
    "DateDifference",
    "FileOperation",
    "FileOperationKind",
]
