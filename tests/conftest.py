import pytest

SYNCED = (
    "[00:17.12] I don't know where I'm going\n"
    "[00:20.38] But I know where I've been\n"
    "[00:24.00] \n"
    "[01:02.345] Slow dancing in the dark\n"
)


@pytest.fixture
def synced_text():
    return SYNCED


@pytest.fixture
def track_payload():
    """A /api/get/{id} response body."""
    return {
        "id": 5432440,
        "trackName": "SLOW DANCING IN THE DARK",
        "artistName": "Joji",
        "albumName": "BALLADS 1",
        "duration": 209.0,
        "instrumental": False,
        "plainLyrics": "I don't know where I'm going\nBut I know where I've been\n\nSlow dancing in the dark",
        "syncedLyrics": SYNCED,
    }
