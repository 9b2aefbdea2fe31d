from tlyrics import LyricLine, Timestamp


def test_total_seconds_truncates_milliseconds():
    assert Timestamp(1, 2, 345).total_seconds() == 62.0
    assert Timestamp(0, 0, 2500).total_seconds() == 2.0


def test_total_seconds_is_float():
    assert isinstance(Timestamp(0, 5, 0).total_seconds(), float)


def test_no_range_validation():
    ts = Timestamp(0, 75, 1999)
    assert ts.seconds == 75
    assert ts.total_seconds() == 76.0


def test_from_seconds():
    assert Timestamp.from_seconds(63.5) == Timestamp(1, 3, 500)
    assert Timestamp.from_seconds(0) == Timestamp(0, 0, 0)


def test_str():
    assert str(Timestamp(1, 2, 345)) == "01:02"
    assert str(Timestamp(0, 17, 12)) == "00:17"


def test_lyric_line_unpacks_as_pair():
    ts, text = LyricLine(Timestamp(0, 1, 0), "hello")
    assert ts == Timestamp(0, 1, 0)
    assert text == "hello"
