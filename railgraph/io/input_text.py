"""Input acquisition for the rail graph.

Reads the raw edge-list text from disk, turning every kind of read
failure into a single typed error.
"""

from __future__ import annotations

from pathlib import Path
from typing import Union

from ..domain.errors import FileUnreadableError


def read_input_text(path: Union[str, Path], encoding: str = "utf-8") -> str:
    """Read the whole edge-list file.

    Parameters
    ----------
    path:
        Location of the input file.
    encoding:
        Text encoding used to decode the file.

    Returns
    -------
    str
        The raw file contents.

    Raises
    ------
    FileUnreadableError
        If the file is missing, not readable, or not valid text in the
        given encoding.
    """
    try:
        return Path(path).read_text(encoding=encoding)
    except (OSError, UnicodeDecodeError) as e:
        raise FileUnreadableError(
            f"Unable to read input file {str(path)!r}",
            cause=e,
            file_path=str(path),
        )
