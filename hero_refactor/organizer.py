"""Hero asset organization into the per-hero folder structure.

Layout produced under the output root::

    hero/
      <heroId>/
        skill/
          icon1.png
          ...
        skin1/
          <fileName>.<ext>
        ...
"""

import json
import logging
import shutil
from pathlib import Path
from typing import Any, Iterable

from .errors import InconsistentIndexError, OutputError
from .models import HeroId, SkillIndex, SkinIndex

logger = logging.getLogger(__name__)


class HeroOrganizer:
    """Copy classified assets into the hero folder structure."""

    def __init__(self, hero_dir: Path):
        """Initialize hero organizer.

        Args:
            hero_dir: Root of the rebuilt hero tree
        """
        self.hero_dir = Path(hero_dir)
        self.copied = 0
        self.failed = 0

    def reset(self) -> None:
        """Remove any previous hero tree and create an empty root."""
        try:
            if self.hero_dir.exists():
                logger.info(f"Removing old data in {self.hero_dir}")
                shutil.rmtree(self.hero_dir)
            self.hero_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise OutputError(f"Cannot reset {self.hero_dir}: {e}") from e

    def ensure_hero_structure(self, hero_id: HeroId, folder: str) -> Path:
        """Ensure ``<hero_dir>/<hero_id>/<folder>`` exists.

        Args:
            hero_id: Hero the folder belongs to
            folder: ``skill`` or ``skin<N>``

        Returns:
            Path to the folder
        """
        path = self.hero_dir / hero_id / folder
        path.mkdir(parents=True, exist_ok=True)
        return path

    def place_skills(self, skill_index: SkillIndex) -> None:
        """Copy every skill icon to ``<hero>/skill/icon<N>.png``."""
        for hero_id, skills in skill_index.items():
            for skill in skills:
                if skill is None:
                    raise InconsistentIndexError(f"Empty skill entry for hero {hero_id}")
                self._copy(skill.absolute_path, hero_id, "skill", f"icon{skill.number}.png")

    def place_skins(self, skin_index: SkinIndex) -> None:
        """Copy every skin file to ``<hero>/skin<N>/<fileName>.<ext>``."""
        for hero_id, skins in skin_index.items():
            for skin in skins:
                if skin is None:
                    raise InconsistentIndexError(f"Empty skin entry for hero {hero_id}")
                self._copy(skin.absolute_path, hero_id, f"skin{skin.number}", skin.target_name)

    def _copy(self, source: str, hero_id: HeroId, folder: str, filename: str) -> None:
        try:
            target = self.ensure_hero_structure(hero_id, folder) / filename
            shutil.copyfile(source, target)
        except OSError as e:
            logger.warning(f"Could not copy {source}: {e}")
            self.failed += 1
            return

        logger.debug(f"Copied {source} -> {target}")
        self.copied += 1


def write_lines(path: Path, lines: Iterable[str]) -> None:
    """Write report lines joined by newlines, even when there are none.

    Paths that were not valid UTF-8 on disk are written back as their
    original bytes.

    Raises:
        OutputError: the file could not be written
    """
    try:
        Path(path).write_text("\n".join(lines), encoding="utf-8", errors="surrogateescape")
    except (OSError, UnicodeEncodeError) as e:
        raise OutputError(f"Cannot write {path}: {e}") from e


def write_json(path: Path, data: Any) -> None:
    """Serialize ``data`` as JSON to ``path``.

    Raises:
        OutputError: the data is not serializable or the file could not be written
    """
    try:
        payload = json.dumps(data, indent=2, ensure_ascii=False, sort_keys=True)
    except (TypeError, ValueError) as e:
        raise OutputError(f"Cannot serialize {path}: {e}") from e

    try:
        Path(path).write_text(payload, encoding="utf-8", errors="surrogateescape")
    except (OSError, UnicodeEncodeError) as e:
        raise OutputError(f"Cannot write {path}: {e}") from e
