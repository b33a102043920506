import pytest

from hero_refactor.classifier import skill_from_path, skin_from_path, split_components
from hero_refactor.errors import (
    ClassificationError,
    NumberFormatError,
    UndefinedPathError,
    WrongFormatError,
)
from hero_refactor.models import ExtensionType, HeroSkill, get_extension_type


def test_split_components_accepts_both_separators() -> None:
    assert split_components("C:\\skin/hero_1_a\\Skin1/a.json") == ["C:", "skin", "hero_1_a", "Skin1", "a.json"]


@pytest.mark.parametrize(
    "path, expected",
    [
        ("a/b.json", ExtensionType.JSON),
        ("a/b.atlas", ExtensionType.ATLAS),
        ("a/b.png", ExtensionType.PNG),
        ("a/b.PNG", ExtensionType.UNDEFINED),
        ("a/b.txt", ExtensionType.UNDEFINED),
    ],
)
def test_get_extension_type(path: str, expected: ExtensionType) -> None:
    assert get_extension_type(path) is expected


def test_skill_from_windows_path() -> None:
    path = "C:\\skill\\hero_0001\\icon_skill_0001_2.png"

    hero_id, skill = skill_from_path(path)

    assert hero_id == "0001"
    assert skill == HeroSkill(number=2, absolute_path=path)


def test_skill_from_posix_path() -> None:
    hero_id, skill = skill_from_path("/data/skill/icon_skill_c042_12.png")

    assert hero_id == "c042"
    assert skill.number == 12


@pytest.mark.parametrize(
    "path",
    [
        "icon_skill_0001_2.png",
        "C:\\skill\\icon_skill_0001_2.json",
        "C:\\skill\\icon_skill_0001_2.png.bak",
    ],
)
def test_skill_undefined_path(path: str) -> None:
    with pytest.raises(UndefinedPathError, match="undefined path"):
        skill_from_path(path)


@pytest.mark.parametrize(
    "path",
    [
        "C:\\skill\\skill_icon_0001_2.png",
        "C:\\skill\\icon_skill_0001.png",
        "C:\\skill\\icon_skill_0001_2_3.png",
        "C:\\skill\\icon_skill__2.png",
    ],
)
def test_skill_wrong_format(path: str) -> None:
    with pytest.raises(WrongFormatError):
        skill_from_path(path)


def test_skill_number_must_be_integer() -> None:
    with pytest.raises(NumberFormatError) as excinfo:
        skill_from_path("C:\\skill\\icon_skill_0001_x.png")

    assert isinstance(excinfo.value, ValueError)
    assert "'x'" in str(excinfo.value)


def test_skin_from_windows_path() -> None:
    path = "C:\\skin\\hero_0001_Aurora\\web_idle\\Skin3\\Aurora.json"

    hero_id, skin = skin_from_path(path)

    assert hero_id == "0001"
    assert skin.number == 3
    assert skin.file_name == "Aurora"
    assert skin.file_extension == "json"
    assert skin.absolute_path == path
    assert skin.target_name == "Aurora.json"


@pytest.mark.parametrize(
    "last, file_name, extension",
    [
        ("Aurora.png", "Aurora", "png"),
        ("Aurora.atlas", "Aurora", "atlas"),
        ("Aurora.json", "Aurora", "json"),
        ("Aurora.v2.json", "Aurora.v2", "json"),
    ],
)
def test_skin_file_name_split(last: str, file_name: str, extension: str) -> None:
    _, skin = skin_from_path(f"/skin/hero_0001_Aurora/Skin1/{last}")

    assert (skin.file_name, skin.file_extension) == (file_name, extension)


def test_skin_last_matching_component_wins() -> None:
    hero_id, skin = skin_from_path("/hero_0001_Old/Skin1/hero_0002_New/Skin7/New.json")

    assert hero_id == "0002"
    assert skin.number == 7


@pytest.mark.parametrize(
    "path",
    [
        "hero_0001_Aurora/Aurora.json",
        "/skin/hero_0001_Aurora/Skin3/Aurora.txt",
        "/skin/hero_0001/Skin3/Aurora.json",
        "/skin/hero_0001_Aurora/web_idle/Aurora.json",
        "/skin/hero_0001_Aurora/Skin/Aurora.json",
    ],
)
def test_skin_undefined_path(path: str) -> None:
    with pytest.raises(UndefinedPathError):
        skin_from_path(path)


def test_skin_number_must_be_integer() -> None:
    with pytest.raises(WrongFormatError, match="SkinX"):
        skin_from_path("/skin/hero_0001_Aurora/SkinBlue/Aurora.json")


def test_skin_file_named_like_skin_folder_is_rejected() -> None:
    # The file name itself matches the Skin prefix and is scanned last.
    with pytest.raises(WrongFormatError):
        skin_from_path("/skin/hero_0001_Aurora/Skin1/Skin1.json")


def test_failures_are_classification_errors() -> None:
    for path in ("x", "/a/b/c.txt", "/a/icon_skill_1.png"):
        with pytest.raises(ClassificationError):
            skill_from_path(path)
        with pytest.raises(ClassificationError):
            skin_from_path(path)


@pytest.mark.parametrize(
    "path",
    [
        "C:\\skill\\icon_skill_0001_ 2.png",
        "C:\\skill\\icon_skill_0001_2 .png",
        "C:\\skill\\icon_skill_0001_\u0663.png",
    ],
)
def test_skill_number_rejects_loose_integers(path: str) -> None:
    with pytest.raises(NumberFormatError):
        skill_from_path(path)


def test_skill_number_accepts_sign() -> None:
    _, skill = skill_from_path("C:\\skill\\icon_skill_0001_+3.png")

    assert skill.number == 3


@pytest.mark.parametrize("folder", ["Skin1_0", "Skin 3", "Skin3 ", "Skin\u0663", "Skin0x1"])
def test_skin_number_rejects_loose_integers(folder: str) -> None:
    with pytest.raises(WrongFormatError, match="SkinX"):
        skin_from_path(f"/skin/hero_0001_Aurora/{folder}/Aurora.json")
