"""Path classification for skill icons and skin assets.

Both rules are locked to the asset naming conventions:

    skill icons:  .../icon_skill_<heroId>_<number>.png
    skins:        .../hero_<heroId>_<name>/.../Skin<number>/<file>.<ext>

Anything that deviates raises a ``ClassificationError`` so the caller can
route it to a report instead of aborting the run.
"""

import re
from typing import List, Tuple

from .errors import NumberFormatError, UndefinedPathError, WrongFormatError
from .models import ExtensionType, HeroId, HeroSkill, Skin, get_extension_type

SKILL_PREFIX = "icon_skill_"
HERO_PREFIX = "hero_"
SKIN_PREFIX = "Skin"

# Inputs may come from Windows trees, so accept both separators.
_SEPARATORS = re.compile(r"[\\/]")

# Plain ASCII decimal with an optional sign; no whitespace or digit separators.
_NUMBER = re.compile(r"[+-]?[0-9]+")


def split_components(path: str) -> List[str]:
    """Split a path into its components on either separator."""
    return _SEPARATORS.split(path)


def _parse_number(text: str, what: str) -> int:
    if not _NUMBER.fullmatch(text):
        raise NumberFormatError(f"invalid {what} number {text!r}")
    return int(text, 10)


def skill_from_path(path: str) -> Tuple[HeroId, HeroSkill]:
    """Extract the hero id and skill icon info from a path.

    Args:
        path: Path ending in ``icon_skill_<heroId>_<number>.png``

    Returns:
        Tuple of (hero id, HeroSkill)

    Raises:
        UndefinedPathError: path too short or not a PNG
        WrongFormatError: file name does not follow the icon pattern
        NumberFormatError: skill number is not an integer
    """
    components = split_components(path)
    if len(components) < 2 or get_extension_type(path) != ExtensionType.PNG:
        raise UndefinedPathError()

    last_component = components[-1]
    if not last_component.startswith(SKILL_PREFIX) or last_component.count("_") != 3:
        raise WrongFormatError()

    stem = last_component[len(SKILL_PREFIX):-len(".png")]
    hero_id, sep, number = stem.partition("_")
    if not hero_id or not sep:
        raise WrongFormatError()

    return hero_id, HeroSkill(number=_parse_number(number, "skill"), absolute_path=path)


def skin_from_path(path: str) -> Tuple[HeroId, Skin]:
    """Extract the hero id and skin info from a path.

    The whole path is scanned; when several components look like a hero
    folder or a skin folder, the last one wins.

    Args:
        path: Path of the form ``.../hero_<id>_<name>/.../Skin<n>/<file>.<ext>``

    Returns:
        Tuple of (hero id, Skin)

    Raises:
        UndefinedPathError: path too short, unknown extension or missing folders
        WrongFormatError: skin folder number is not an integer
    """
    components = split_components(path)
    extension = get_extension_type(path)
    if len(components) < 3 or extension == ExtensionType.UNDEFINED:
        raise UndefinedPathError()

    hero_component, skin_component = "", ""
    for component in components:
        if component.startswith(HERO_PREFIX) and component.count("_") == 2:
            hero_component = component
        if component.startswith(SKIN_PREFIX) and len(component) > len(SKIN_PREFIX):
            skin_component = component

    if not hero_component or not skin_component:
        raise UndefinedPathError()

    hero_id = hero_component.split("_")[1]

    try:
        skin_number = _parse_number(skin_component[len(SKIN_PREFIX):], "skin")
    except NumberFormatError:
        raise WrongFormatError(
            "wrong format: can't convert skin number, folder should be in form 'SkinX'"
        ) from None

    # The cut length is the extension ordinal plus four, which equals the
    # suffix length for .png (4), .json (5) and .atlas (6).
    last_component = components[-1]
    file_name = last_component[: len(last_component) - int(extension) - 4]
    file_extension = last_component[len(file_name) + 1:]

    return hero_id, Skin(
        number=skin_number,
        absolute_path=path,
        file_name=file_name,
        file_extension=file_extension,
    )
