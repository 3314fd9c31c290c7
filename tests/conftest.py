import json
from pathlib import Path

import pytest


STATIC_PLAYERS = [
    {"id": 1, "name": "Virat Kohli", "team": "Royal Challengers Bengaluru", "priceCr": 21, "photoUrl": "https://img.example/vk.png"},
    {"id": 2, "name": "Jasprit Bumrah", "team": "Mumbai Indians", "priceCr": 18, "photoUrl": "https://img.example/jb.png"},
    {"id": 3, "name": "Rinku Singh", "team": "Kolkata Knight Riders", "priceCr": 13, "photoUrl": "https://img.example/rs.png"},
    {"id": 4, "name": "Uncapped Rookie", "team": "Mumbai Indians", "priceCr": 0.3, "photoUrl": "https://img.example/ur.png"},
]

DYNAMIC_STATS = {
    "Virat Kohli": {"runs": 657, "wickets": 0},
    "Jasprit Bumrah": {"runs": 8, "wickets": 18},
    "Rinku Singh": {"runs": 206, "wickets": 0},
}


@pytest.fixture
def anyio_backend():
    return "asyncio"


def write_json(path: Path, payload) -> Path:
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


@pytest.fixture
def static_file(tmp_path: Path) -> Path:
    return write_json(tmp_path / "players-static.json", STATIC_PLAYERS)


@pytest.fixture
def dynamic_file(tmp_path: Path) -> Path:
    return write_json(tmp_path / "players-dynamic.json", DYNAMIC_STATS)
