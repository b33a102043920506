"""Skill name table loaded from the skill registry CSV."""

import logging
from pathlib import Path
from typing import Union

from .errors import SkillNameTableError
from .models import SkillNameTable

logger = logging.getLogger(__name__)


def load_skill_names(csv_path: Union[str, Path]) -> SkillNameTable:
    """Load the ``<heroId>_<skillNumber> -> skill name`` table.

    The first line is a header. Rows are split on line feeds only, and the
    carriage return ending a CRLF row is dropped. Every other row is split
    on commas and contributes its first two columns; rows with fewer
    columns are skipped and later duplicates replace earlier ones.

    Args:
        csv_path: Path to the CSV file

    Returns:
        Dict mapping skill key to display name

    Raises:
        SkillNameTableError: the file could not be read
    """
    path = Path(csv_path)
    try:
        with open(path, "r", encoding="utf-8", newline="") as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise SkillNameTableError(f"Cannot read skill CSV {path}: {e}") from e

    names: SkillNameTable = {}
    skipped = 0
    for row in text.split("\n")[1:]:
        columns = row.rstrip("\r").split(",")
        if len(columns) >= 2:
            names[columns[0]] = columns[1]
        else:
            skipped += 1

    logger.debug(f"Loaded {len(names)} skill names from {path} ({skipped} short rows skipped)")
    return names
