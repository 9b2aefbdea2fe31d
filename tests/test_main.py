from unittest.mock import MagicMock, patch

import pytest
import requests

import main
from tlyrics import MUSIC_INDICATOR, Track


@pytest.fixture
def fake_client(track_payload):
    client = MagicMock()
    client.__enter__.return_value = client
    client.get_by_id.return_value = Track.from_json(track_payload)
    client.search.return_value = [Track.from_json(track_payload)]
    with patch.object(main, "LrcLibClient", return_value=client), patch.object(main, "setup_logging"):
        yield client


def test_search(fake_client, capsys):
    assert main.main(["search", "joji"]) == 0
    out = capsys.readouterr().out
    assert "5432440" in out
    assert "Joji - SLOW DANCING IN THE DARK (BALLADS 1) [synced]" in out
    fake_client.search.assert_called_once_with("joji")


def test_get(fake_client, capsys):
    assert main.main(["get", "5432440"]) == 0
    out = capsys.readouterr().out
    assert "duration:     3:29" in out


def test_sync_lists_lines(fake_client, capsys):
    assert main.main(["sync", "5432440"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "[00:17] I don't know where I'm going"
    assert lines[2] == f"[00:24] {MUSIC_INDICATOR}"


def test_sync_at(fake_client, capsys):
    assert main.main(["sync", "5432440", "--at", "21"]) == 0
    assert capsys.readouterr().out.strip() == "[00:20] But I know where I've been"


def test_sync_play_sleeps_deltas(fake_client, capsys):
    with patch.object(main.time, "sleep") as sleep:
        assert main.main(["sync", "5432440", "--play"]) == 0
    assert [c.args[0] for c in sleep.call_args_list] == [17.0, 3.0, 4.0, 38.0]
    assert capsys.readouterr().out.splitlines()[0] == MUSIC_INDICATOR


def test_transport_error_exit_code(fake_client, capsys):
    fake_client.get_by_id.side_effect = requests.ConnectionError("unreachable")
    assert main.main(["get", "1"]) == 1
    assert "error: unreachable" in capsys.readouterr().err
