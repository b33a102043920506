from __future__ import annotations

from pathlib import Path
import sys

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


def _write(path: Path, content: bytes) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(content)
    return path


@pytest.fixture()
def skill_tree(tmp_path: Path) -> Path:
    root = tmp_path / "skill"
    _write(root / "hero_0001" / "icon_skill_0001_1.png", b"\x89PNG icon 0001-1")
    _write(root / "hero_0001" / "icon_skill_0001_2.png", b"\x89PNG icon 0001-2")
    _write(root / "hero_0002" / "nested" / "icon_skill_0002_1.png", b"\x89PNG icon 0002-1")
    _write(root / "hero_0002" / "icon_skill_0002.png", b"bad")
    _write(root / "notes.txt", b"not an icon")
    return root


@pytest.fixture()
def skin_tree(tmp_path: Path) -> Path:
    root = tmp_path / "skin"
    aurora = root / "hero_0001_Aurora" / "web_idle" / "Skin3"
    _write(aurora / "Aurora.json", b'{"skeleton": {}}')
    _write(aurora / "Aurora.atlas", b"Aurora.png\nsize: 64,64")
    _write(aurora / "Aurora.png", b"\x89PNG aurora")
    _write(root / "hero_0002_Bram" / "Skin1" / "Bram.json", b"{}")
    _write(root / "hero_0002_Bram" / "Skin1" / "readme.txt", b"unknown extension")
    _write(root / "loose" / "Skin2" / "orphan.json", b"{}")
    return root


@pytest.fixture()
def skill_csv(tmp_path: Path) -> Path:
    path = tmp_path / "skills.csv"
    path.write_text(
        "id,name,description\n"
        "0001_1,Frost Nova,Freezes enemies\n"
        "0001_2,Ice Lance,Pierces\n"
        "0002_1,Shield Bash,Stuns\n"
        "0002_3,War Cry,Buffs allies\n",
        encoding="utf-8",
    )
    return path
