"""Build the hero indexes and the lookup tables derived from them."""

import logging
from typing import Callable, Dict, Iterable, List, Optional, Tuple, TypeVar

from .errors import ClassificationError, InconsistentIndexError
from .models import HeroId, SkillIndex, SkillNameTable, SkinIndex, skill_key

logger = logging.getLogger(__name__)

T = TypeVar("T")


def classify_paths(
    paths: Iterable[str],
    classify: Callable[[str], Tuple[HeroId, T]],
) -> Tuple[Dict[HeroId, List[T]], List[str]]:
    """Group classified paths by hero.

    Args:
        paths: File paths in walk order
        classify: ``skill_from_path`` or ``skin_from_path``

    Returns:
        Tuple of (index by hero id, unknown path report lines)
    """
    index: Dict[HeroId, List[T]] = {}
    unknown: List[str] = []

    for path in paths:
        try:
            hero_id, record = classify(path)
        except ClassificationError as e:
            logger.debug(f"Unclassified {path}: {e}")
            unknown.append(f"{path} ({e})")
            continue
        index.setdefault(hero_id, []).append(record)

    return index, unknown


def build_hero_spine(skin_index: SkinIndex) -> Dict[str, str]:
    """Map ``<heroId>_<skinNumber>`` to the base name of each JSON skin."""
    spine: Dict[str, str] = {}
    for hero_id, skins in skin_index.items():
        for skin in skins:
            if skin is None:
                raise InconsistentIndexError(f"Empty skin entry for hero {hero_id}")
            if skin.file_extension == "json":
                spine[skill_key(hero_id, skin.number)] = skin.file_name
    return spine


def build_hero_skills(
    skill_index: SkillIndex,
    skill_names: SkillNameTable,
    skill_count: int = 4,
) -> Tuple[Dict[HeroId, List[Optional[str]]], List[HeroId]]:
    """Cross-check skill icons against the skill name table.

    For every hero with at least one icon, slot ``i`` (skill number
    ``i + 1``) holds the skill's name when the hero has that icon (an
    empty string if the table has no name for it), and None when the
    icon is missing. A hero id is reported once for every skill number where
    having an icon and having a name disagree.

    Args:
        skill_index: Skill icons grouped by hero
        skill_names: Names keyed by ``<heroId>_<skillNumber>``
        skill_count: Number of skill slots per hero

    Returns:
        Tuple of (hero id -> skill names, wrongly synchronized hero ids)
    """
    hero_skills: Dict[HeroId, List[Optional[str]]] = {}
    wrong_synchronized: List[HeroId] = []

    for hero_id, skills in skill_index.items():
        if any(skill is None for skill in skills):
            raise InconsistentIndexError(f"Empty skill entry for hero {hero_id}")
        icon_numbers = {skill.number for skill in skills}

        slots: List[Optional[str]] = []
        for number in range(1, skill_count + 1):
            name = skill_names.get(skill_key(hero_id, number), "")
            has_icon = number in icon_numbers
            if has_icon != bool(name):
                logger.debug(f"Hero {hero_id} skill {number}: icon={has_icon} name={name!r}")
                wrong_synchronized.append(hero_id)
            slots.append(name if has_icon else None)
        hero_skills[hero_id] = slots

    return hero_skills, wrong_synchronized
