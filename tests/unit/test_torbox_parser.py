import pytest

from streamwrap.domain.stream import RawStream
from streamwrap.services.parsers import TorboxStreamParser
from streamwrap.services.parsers.torbox_parser import TorboxDescription

INFO_HASH = "0123456789abcdef0123456789abcdef01234567"

TORRENT_DESCRIPTION = (
    "Quality: 1080p\n"
    "Name: Movie.2020.1080p.WEB.mkv\n"
    "Size: 1.5 GB\n"
    "Language: english\n"
    "Type: Torrent | Seeders: 45"
)

USENET_DESCRIPTION = (
    "Quality: 2160p\n"
    "Name: Movie.2020.2160p.mkv\n"
    "Size: 20 GB\n"
    "Language: multi audio\n"
    "Type: Usenet | Age: 12d"
)


@pytest.fixture
def parser(addon, fake_parser):
    return TorboxStreamParser(addon, filename_parser=fake_parser)


def make_stream(**data):
    data.setdefault("url", "https://stremio.torbox.app/play/1")
    data.setdefault("name", "TorBox ⚡")
    return RawStream.from_dict(data)


def test_description_fields():
    fields = TorboxDescription(TORRENT_DESCRIPTION)
    assert fields.type == "torrent"
    assert fields.age_or_seeders == "45"
    assert fields.get(("name",)) == "Movie.2020.1080p.WEB.mkv"
    assert fields.get(("size",)) == "1.5 GB"
    assert fields.get(("missing",)) is None


def test_description_value_keeps_later_colons():
    fields = TorboxDescription("Name: Movie: The Sequel.mkv\nType: web")
    assert fields.get(("name",)) == "Movie: The Sequel.mkv"
    assert fields.type == "web"
    assert fields.age_or_seeders is None


def test_explicit_type_is_trusted():
    fields = TorboxDescription("Type: torrent | 5", explicit_type="usenet")
    assert fields.type == "usenet"
    assert fields.age_or_seeders == "5"


def test_invalid_explicit_type_is_ignored():
    fields = TorboxDescription("Type: Torrent | 5", explicit_type="Torrent")
    assert fields.type == "torrent"


def test_type_line_seeders_without_separate_field(parser):
    stream = make_stream(description="Type: torrent | 120\n🌐 MyIndexer\n👥 35")
    result = parser.parse(stream)

    assert result.indexers == "MyIndexer"
    # the seeders marker line is not an explicit field, the type line wins
    assert result.torrent.seeders == 120
    assert result.usenet.age is None


def test_explicit_seeders_take_precedence(parser):
    result = parser.parse(make_stream(description=TORRENT_DESCRIPTION, seeders=50))
    assert result.torrent.seeders == 50

    result = parser.parse(make_stream(description=TORRENT_DESCRIPTION))
    assert result.torrent.seeders == 45


def test_torrent_stream(parser, fake_parser):
    stream = make_stream(
        description=TORRENT_DESCRIPTION, hash=INFO_HASH, is_cached=True
    )
    result = parser.parse(stream)

    assert fake_parser.calls == ["Movie.2020.1080p.WEB.mkv"]
    assert result.filename == "Movie.2020.1080p.WEB.mkv"
    assert result.size == 1_500_000_000
    assert result.languages == ["English"]
    assert result.info_hash == INFO_HASH
    assert result.provider.id == "torbox"
    assert result.provider.cached is True
    assert result.usenet.age is None
    assert result.personal is False


def test_usenet_stream_drops_info_hash(parser):
    result = parser.parse(make_stream(description=USENET_DESCRIPTION, hash=INFO_HASH))

    assert result.usenet.age == "12d"
    assert result.torrent.seeders is None
    assert result.info_hash is None
    assert result.languages == ["Multi"]
    assert result.size == 20 * 1000**3


def test_web_stream_has_no_seeders_or_age(parser):
    result = parser.parse(make_stream(description="Name: Movie.2020.mkv\nType: Web | 9"))
    assert result.torrent.seeders is None
    assert result.usenet.age is None


def test_info_hash_from_url(parser):
    stream = make_stream(
        url=f"https://stremio.torbox.app/play/{INFO_HASH}/1",
        description=TORRENT_DESCRIPTION,
    )
    assert parser.parse(stream).info_hash == INFO_HASH


def test_personal_stream(parser):
    result = parser.parse(make_stream(name="TorBox Your Media", description=TORRENT_DESCRIPTION))
    assert result.personal is True

    result = parser.parse(make_stream(name="TorBox your media", description=TORRENT_DESCRIPTION))
    assert result.personal is False


def test_explicit_language_takes_precedence(parser, fake_parser):
    fake_parser.languages = ["English"]
    result = parser.parse(
        make_stream(description=TORRENT_DESCRIPTION.replace("english", "French"), language="ENGLISH")
    )
    assert result.languages == ["English"]


def test_unknown_language_is_dropped(parser):
    description = TORRENT_DESCRIPTION.replace("english", "Unknown")
    assert parser.parse(make_stream(description=description)).languages == []


def test_size_precedence(parser):
    assert parser.parse(make_stream(description=TORRENT_DESCRIPTION, size=999)).size == 999
    stream = make_stream(description=TORRENT_DESCRIPTION, behaviorHints={"videoSize": "4096"})
    assert parser.parse(stream).size == 4096


def test_filename_hint_and_description_fallback(parser, fake_parser):
    stream = make_stream(
        description=TORRENT_DESCRIPTION, behaviorHints={"filename": "Hint.2021.mkv"}
    )
    assert parser.parse(stream).filename == "Hint.2021.mkv"

    description = "Quality: 720p\nType: Torrent | 3"
    result = parser.parse(make_stream(description=description))
    assert result.filename is None
    assert fake_parser.calls[-1] == description


def test_renamed_label_falls_back_to_line_position(parser, fake_parser):
    description = (
        "Quality: 1080p\n"
        "File: Movie.2020.1080p.mkv\n"
        "Size: 1 GB\n"
        "Language: English\n"
        "Type: torrent | Seeders: 4"
    )
    result = parser.parse(make_stream(description=description))

    assert result.filename == "Movie.2020.1080p.mkv"
    assert fake_parser.calls == ["Movie.2020.1080p.mkv"]
    assert result.size == 1_000_000_000
    assert result.languages == ["English"]
    assert result.torrent.seeders == 4


def test_unlabelled_description_uses_line_positions(parser):
    description = "1080p\nMovie.2020.1080p.mkv\n1 GB\nEnglish\nType: torrent | 4"
    result = parser.parse(make_stream(description=description))

    assert result.filename == "Movie.2020.1080p.mkv"
    assert result.size == 1_000_000_000
    assert result.languages == ["English"]
    assert result.torrent.seeders == 4


def test_position_fallback_skips_other_fields_and_stat_lines():
    fields = TorboxDescription("Quality: 720p\nSize: 2 GB\nType: torrent | 3")
    assert fields.get(("name",), 1) is None
    assert fields.get(("size",), 2) == "2 GB"

    fields = TorboxDescription("Type: torrent | 120\n🌐 MyIndexer\n👥 35")
    assert fields.get(("name",), 1) is None
    assert fields.get(("size",), 2) is None
    assert fields.get(("language",), 3) is None
