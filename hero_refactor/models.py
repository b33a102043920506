"""Data model shared by the classifier, indexer and organizer."""

from dataclasses import dataclass
from enum import IntEnum
from typing import Dict, List

HeroId = str


class ExtensionType(IntEnum):
    """Asset file kinds, by suffix.

    The ordinal values matter: the skin classifier uses them to work out
    how many characters to cut from a file name.
    """

    PNG = 0
    JSON = 1
    ATLAS = 2
    UNDEFINED = 3


def get_extension_type(path: str) -> ExtensionType:
    """Classify a path by its suffix."""
    if path.endswith(".json"):
        return ExtensionType.JSON
    if path.endswith(".atlas"):
        return ExtensionType.ATLAS
    if path.endswith(".png"):
        return ExtensionType.PNG
    return ExtensionType.UNDEFINED


@dataclass(frozen=True)
class HeroSkill:
    """One skill icon belonging to a hero."""

    number: int
    absolute_path: str


@dataclass(frozen=True)
class Skin:
    """One skin asset belonging to a hero.

    ``file_name`` and ``file_extension`` are the last path component split
    around its recognized suffix, e.g. ``Aurora`` and ``json``.
    """

    number: int
    absolute_path: str
    file_name: str
    file_extension: str

    @property
    def target_name(self) -> str:
        return f"{self.file_name}.{self.file_extension}"


SkillIndex = Dict[HeroId, List[HeroSkill]]
SkinIndex = Dict[HeroId, List[Skin]]
SkillNameTable = Dict[str, str]


def skill_key(hero_id: HeroId, number: int) -> str:
    """Build the ``<heroId>_<number>`` key used by the CSV and the spine."""
    return f"{hero_id}_{number}"
