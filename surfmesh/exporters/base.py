"""Base class for mesh file exporters."""

import os
import logging
from abc import ABC, abstractmethod
from typing import ClassVar, List

from ..exceptions import ExportError
from ..mesh import MeshBuffers
from ..utils import ensure_directory_exists

# Set up logging
logger = logging.getLogger(__name__)


class MeshExporter(ABC):
    """
    Writes MeshBuffers to one file format.

    Subclasses set ``format_name`` and ``file_extensions`` and implement
    :meth:`write`.
    """

    format_name: ClassVar[str] = ""
    file_extensions: ClassVar[List[str]] = []
    supports_binary: ClassVar[bool] = False

    @classmethod
    def get_extension(cls) -> str:
        """Get default file extension."""
        return cls.file_extensions[0]

    @classmethod
    def export(cls, buffers: MeshBuffers, filename: str, binary: bool = True, **kwargs) -> str:
        """
        Export mesh buffers to a file.

        Args:
            buffers: Built mesh buffers
            filename: Output filename; the extension is corrected if needed
            binary: Use the binary variant when the format has one
            **kwargs: Format-specific options

        Returns:
            Path of the written file

        Raises:
            ExportError: If the file cannot be written
        """
        extension = cls.get_extension()
        if not filename.lower().endswith(f".{extension}"):
            filename = f"{os.path.splitext(filename)[0]}.{extension}"

        try:
            ensure_directory_exists(filename)
            cls.write(buffers, filename, binary=binary and cls.supports_binary, **kwargs)
        except OSError as e:
            logger.error(f"Error exporting to {cls.format_name}: {e}")
            raise ExportError(f"Failed to write {filename}: {e}") from e

        logger.info(f"Exported {cls.format_name} file to {filename}")
        return filename

    @classmethod
    @abstractmethod
    def write(cls, buffers: MeshBuffers, filename: str, binary: bool = False, **kwargs) -> None:
        """Write the buffers to ``filename``."""
