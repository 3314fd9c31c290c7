import asyncio
import logging
from pathlib import Path

import pytest

from auctionboard.store import PlayerStore

from .conftest import STATIC_PLAYERS, write_json


def test_reload_combines_both_files(static_file: Path, dynamic_file: Path):
    store = PlayerStore(static_file, dynamic_file)
    assert store.snapshot is None
    assert store.players == ()

    snapshot = store.reload()

    assert store.snapshot is snapshot
    assert [player.name for player in snapshot.players] == [entry["name"] for entry in STATIC_PLAYERS]
    assert snapshot.players[0].runs == 657
    # Not present in the stats file.
    assert (snapshot.players[3].runs, snapshot.players[3].wickets) == (0, 0)


def test_missing_dynamic_file_yields_zero_stats(static_file: Path, tmp_path: Path, caplog):
    store = PlayerStore(static_file, tmp_path / "players-dynamic.json")
    with caplog.at_level(logging.WARNING, logger="uvicorn.error"):
        snapshot = store.reload()

    assert len(snapshot.players) == len(STATIC_PLAYERS)
    assert all(player.runs == 0 and player.wickets == 0 for player in snapshot.players)
    assert any("dynamic stats will be 0" in record.getMessage() for record in caplog.records)


def test_unparseable_dynamic_file_yields_zero_stats(static_file: Path, tmp_path: Path):
    broken = tmp_path / "players-dynamic.json"
    broken.write_text("{not json", encoding="utf-8")

    snapshot = PlayerStore(static_file, broken).reload()

    assert all(player.runs == 0 for player in snapshot.players)


def test_missing_static_file_publishes_empty_snapshot(tmp_path: Path, dynamic_file: Path, caplog):
    static_path = write_json(tmp_path / "players-static.json", STATIC_PLAYERS)
    store = PlayerStore(static_path, dynamic_file)
    assert store.reload().players

    static_path.unlink()
    with caplog.at_level(logging.ERROR, logger="uvicorn.error"):
        snapshot = store.reload()

    assert snapshot.players == ()
    assert store.players == ()
    assert any(record.levelno == logging.ERROR for record in caplog.records)

    write_json(static_path, STATIC_PLAYERS[:1])
    assert [player.name for player in store.reload().players] == [STATIC_PLAYERS[0]["name"]]


def test_reload_replaces_snapshot_object(static_file: Path, dynamic_file: Path):
    store = PlayerStore(static_file, dynamic_file)
    first = store.reload()
    held = first.players

    write_json(dynamic_file, {"Virat Kohli": {"runs": 700, "wickets": 1}})
    second = store.reload()

    assert second is not first
    assert held[0].runs == 657
    assert second.players[0].runs == 700


@pytest.mark.anyio
async def test_run_periodic_reloads_until_cancelled(static_file: Path, dynamic_file: Path):
    store = PlayerStore(static_file, dynamic_file)
    task = asyncio.create_task(store.run_periodic(0.01))
    for _ in range(200):
        if store.snapshot is not None:
            break
        await asyncio.sleep(0.01)
    task.cancel()
    with pytest.raises(asyncio.CancelledError):
        await task

    assert store.snapshot is not None


def test_non_utf8_static_file_publishes_empty_snapshot(tmp_path: Path, dynamic_file: Path, caplog):
    static_path = write_json(tmp_path / "players-static.json", STATIC_PLAYERS)
    store = PlayerStore(static_path, dynamic_file)
    assert store.reload().players

    static_path.write_bytes(b'[{"name": "A\xff", "priceCr": 1}]')
    with caplog.at_level(logging.ERROR, logger="uvicorn.error"):
        snapshot = store.reload()

    assert snapshot.players == ()
    assert store.players == ()
    assert any("invalid UTF-8" in record.getMessage() for record in caplog.records)


def test_non_utf8_dynamic_file_yields_zero_stats(static_file: Path, tmp_path: Path):
    broken = tmp_path / "players-dynamic.json"
    broken.write_bytes(b'{"Virat Kohli\xff": {"runs": 1}}')

    snapshot = PlayerStore(static_file, broken).reload()

    assert len(snapshot.players) == len(STATIC_PLAYERS)
    assert all(player.runs == 0 for player in snapshot.players)
