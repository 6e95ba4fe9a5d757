"""
Summary: Verify fallback chains and numbering used to normalize discovered tracks.
Why: Manifest fields must stay stable for inconsistent sidecars and gapped filename prefixes.
"""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from ytdtd.config.settings import UNKNOWN_ARTIST
from ytdtd.features.album.domain.models import AlbumKind, Track, TrackInfo
from ytdtd.features.album.usecases.normalizer import (
    assign_track_numbers,
    build_manifest,
    extract_leading_number,
    normalize_track,
    normalize_tracks,
    order_tracks,
    resolve_album_title,
    resolve_display_name,
    resolve_year,
    split_artists,
)
from ytdtd.shared.errors import UnresolvedYear


def _track(filename: str, **info: object) -> Track:
    info.setdefault("release_year", 2020)
    return Track(audio_path=Path("/src") / filename, info=TrackInfo(**info))  # pyright: ignore[reportArgumentType]


@pytest.mark.parametrize(
    ("filename", "expected"),
    [
        ("01. Song.opus", 1),
        ("7 - Seven.opus", 7),
        ("  12. Padded.opus", 12),
        ("Song.opus", None),
        ("Track 3.opus", None),
    ],
)
def test_extract_leading_number(filename: str, expected: int | None) -> None:
    assert extract_leading_number(filename) == expected


def test_resolve_display_name_prefers_track_then_title_then_stem() -> None:
    assert resolve_display_name(_track("01. File.opus", track="Track", title="Title")) == "Track"
    assert resolve_display_name(_track("01. File.opus", title="Title")) == "Title"
    assert resolve_display_name(_track("01. File.opus")) == "01. File"


def test_split_artists_separates_primary_and_featuring() -> None:
    assert split_artists(("A", "B", "C")) == ("A", ("B", "C"))
    assert split_artists(("Solo",)) == ("Solo", ())


def test_split_artists_falls_back_to_unknown_artist() -> None:
    assert split_artists(()) == (UNKNOWN_ARTIST, ())


def test_resolve_year_prefers_release_year() -> None:
    assert resolve_year(TrackInfo(release_year=1999, upload_date="20201231")) == 1999


def test_resolve_year_falls_back_to_upload_date_prefix() -> None:
    assert resolve_year(TrackInfo(release_year=0, upload_date="20201231")) == 2020


def test_resolve_year_ignores_implausible_release_year() -> None:
    assert resolve_year(TrackInfo(release_year=20, upload_date="19851010")) == 1985


@pytest.mark.parametrize("upload_date", ["", "20", "abcd0101", "0999"])
def test_resolve_year_raises_when_no_source_is_usable(upload_date: str) -> None:
    with pytest.raises(UnresolvedYear, match="Song"):
        _ = resolve_year(TrackInfo(upload_date=upload_date), track_name="Song")


def test_order_tracks_sorts_by_numeric_prefix() -> None:
    tracks = [_track("10. Ten.opus"), _track("2. Two.opus"), _track("1. One.opus")]

    ordered = order_tracks(tracks)

    assert [track.filename for track in ordered] == ["1. One.opus", "2. Two.opus", "10. Ten.opus"]


def test_order_tracks_keeps_discovery_order_for_ties() -> None:
    tracks = [_track("01. B.opus"), _track("01. A.opus")]

    ordered = order_tracks(tracks)

    assert [track.filename for track in ordered] == ["01. B.opus", "01. A.opus"]


def test_normalize_tracks_keeps_contiguous_prefixes(caplog: pytest.LogCaptureFixture) -> None:
    """A partial playlist download keeps its original track numbers."""

    tracks = [_track("05. E.opus"), _track("06. F.opus"), _track("07. G.opus")]

    with caplog.at_level(logging.INFO, logger="ytdtd"):
        normalized = normalize_tracks(order_tracks(tracks))

    assert [track.number for track in normalized] == [5, 6, 7]
    assert [track.source_filename for track in normalized] == ["05. E.opus", "06. F.opus", "07. G.opus"]
    assert "Renumbered" not in caplog.text


def test_normalize_tracks_compacts_gapped_prefixes(caplog: pytest.LogCaptureFixture) -> None:
    """A skipped playlist entry must not leave a hole in the numbering."""

    tracks = [_track("01. A.opus"), _track("03. C.opus"), _track("04. D.opus")]

    with caplog.at_level(logging.INFO, logger="ytdtd"):
        normalized = normalize_tracks(order_tracks(tracks))

    assert [track.number for track in normalized] == [1, 2, 3]
    assert [track.source_filename for track in normalized] == ["01. A.opus", "03. C.opus", "04. D.opus"]
    assert "Renumbered 03. C.opus from 3 to 2" in caplog.text


@pytest.mark.parametrize(
    ("filenames", "expected"),
    [
        (["12. L.opus", "13. M.opus"], [12, 13]),
        (["00. Intro.opus", "01. A.opus"], [1, 2]),
        (["05. E.opus", "05. F.opus"], [1, 2]),
        (["05. E.opus", "F.opus"], [1, 2]),
        (["3. C.opus", "5. E.opus"], [1, 2]),
    ],
)
def test_assign_track_numbers_keeps_prefixes_only_for_a_gap_free_run(
    filenames: list[str], expected: list[int]
) -> None:
    ordered = order_tracks([_track(filename) for filename in filenames])

    assert assign_track_numbers(ordered) == expected


def test_normalize_tracks_numbers_unprefixed_files_by_position() -> None:
    tracks = [_track("Beta.opus"), _track("Alpha.opus")]

    normalized = normalize_tracks(order_tracks(tracks))

    assert [(track.number, track.source_filename) for track in normalized] == [
        (1, "Beta.opus"),
        (2, "Alpha.opus"),
    ]


def test_normalize_tracks_numbers_are_unique_and_contiguous() -> None:
    tracks = [_track("05. E.opus"), _track("05. F.opus"), _track("G.opus"), _track("09. I.opus")]

    numbers = [track.number for track in normalize_tracks(order_tracks(tracks))]

    assert numbers == list(range(1, len(tracks) + 1))


def test_normalize_tracks_trusts_the_given_order() -> None:
    tracks = [_track("02. B.opus"), _track("01. A.opus")]

    normalized = normalize_tracks(tracks)

    assert [(track.number, track.source_filename) for track in normalized] == [
        (1, "02. B.opus"),
        (2, "01. A.opus"),
    ]


def test_normalize_track_resolves_every_field() -> None:
    track = _track(
        "01. Song.opus",
        track="Song",
        artists=("Main", "Guest"),
        release_year=0,
        upload_date="20190704",
        duration=180,
        genres=("Rock",),
        tags=("live",),
    )

    normalized = normalize_track(track, 4)

    assert normalized.number == 4
    assert normalized.display_name == "Song"
    assert normalized.primary_artist == "Main"
    assert normalized.featuring_artists == ("Guest",)
    assert normalized.year == 2019
    assert normalized.source_filename == "01. Song.opus"
    assert normalized.duration == 180
    assert normalized.genres == ("Rock",)
    assert normalized.tags == ("live",)


def test_resolve_album_title_for_single_uses_display_name() -> None:
    tracks = [_track("01. Song.opus", track="Song", album="Some Album")]

    assert resolve_album_title(tracks, AlbumKind.SINGLE) == "Song"


def test_resolve_album_title_for_album_prefers_album_then_playlist() -> None:
    with_album = [_track("01. A.opus", track="A", album="Record", playlist_title="Playlist")]
    with_playlist = [_track("01. A.opus", track="A", playlist_title="Playlist")]
    bare = [_track("01. A.opus", track="A")]

    assert resolve_album_title(with_album, AlbumKind.ALBUM) == "Record"
    assert resolve_album_title(with_playlist, AlbumKind.ALBUM) == "Playlist"
    assert resolve_album_title(bare, AlbumKind.ALBUM) == "A"


def test_resolve_album_title_uses_first_ordered_track() -> None:
    tracks = [_track("02. B.opus", album="Wrong"), _track("01. A.opus", album="Right")]

    assert resolve_album_title(tracks, AlbumKind.ALBUM) == "Right"


def test_build_manifest_uses_first_track_primary_artist() -> None:
    tracks = [
        _track("02. B.opus", track="B", artists=("Other",)),
        _track("01. A.opus", track="A", artists=("X", "Y")),
    ]

    manifest = build_manifest("Demo", order_tracks(tracks))

    assert manifest.album_title == "Demo"
    assert manifest.album_artist == "X"
    assert manifest.cover_art_relative_path == "cover.png"
    assert [track.display_name for track in manifest.tracks] == ["A", "B"]


def test_build_manifest_reports_unknown_artist_without_credits() -> None:
    manifest = build_manifest("Demo", [_track("01. A.opus", track="A")])

    assert manifest.album_artist == UNKNOWN_ARTIST
    assert manifest.tracks[0].featuring_artists == ()


def test_build_manifest_raises_for_unresolved_year() -> None:
    tracks = [_track("01. A.opus", track="A", release_year=0, upload_date="")]

    with pytest.raises(UnresolvedYear):
        _ = build_manifest("Demo", tracks)


def test_normalize_tracks_mixes_prefixed_and_unprefixed_files() -> None:
    tracks = [_track("01. Song.opus"), _track("2. Other.opus"), _track("Track.opus")]

    normalized = normalize_tracks(order_tracks(tracks))

    assert [(track.number, track.source_filename) for track in normalized] == [
        (1, "01. Song.opus"),
        (2, "2. Other.opus"),
        (3, "Track.opus"),
    ]
