import logging
from pathlib import Path

from ifcval_core.errors import decode_content

_logger = logging.getLogger("ifcval.cli")


def read_ifc_file(path: Path) -> str:
    """Read an IFC file as text.

    Undecodable bytes are kept as lone surrogates rather than aborting, so the
    CHARACTER_ENCODING check can report them. Raises OSError if the file
    cannot be read.
    """
    raw = path.read_bytes()
    _logger.debug("read %s (%d bytes)", path, len(raw))
    return decode_content(raw, path.name, errors="surrogateescape")
