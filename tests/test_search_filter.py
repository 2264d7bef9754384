"""
Unit tests for the search condition builder
"""
from sqlalchemy.dialects import sqlite

from app.crud.search import SongFilter
from app.models import Song


def compile_filter(song_filter: SongFilter):
    compiled = song_filter.statement().compile(dialect=sqlite.dialect())
    bound = [compiled.params[name] for name in compiled.positiontup]
    return str(compiled), bound


def test_no_conditions_has_no_where():
    sql, bound = compile_filter(SongFilter.from_query())

    assert "WHERE" not in sql
    assert bound == []


def test_patterns_are_wrapped():
    song_filter = SongFilter.from_query(artist="Daft")
    assert song_filter.params() == ["%Daft%"]


def test_bind_order_follows_condition_order():
    song_filter = SongFilter.from_query(title="a", artist="b", genre="c")

    sql, bound = compile_filter(song_filter)

    assert bound == ["%a%", "%b%", "%c%"]
    where = sql.split("WHERE", 1)[1]
    assert where.index("songs.title") < where.index("songs.artist") < where.index("songs.genre")
    assert sql.count("LIKE lower(?)") == 3
    assert " AND " in sql


def test_fixed_order_regardless_of_keyword_order():
    song_filter = SongFilter.from_query(genre="c", title="a")

    _, bound = compile_filter(song_filter)

    assert bound == ["%a%", "%c%"]


def test_empty_string_and_none_are_absent():
    song_filter = SongFilter().add(Song.title, "").add(Song.artist, None)

    assert not song_filter
    assert song_filter.conditions() == []


def test_manual_add_keeps_insertion_order():
    song_filter = SongFilter().add(Song.genre, "x").add(Song.title, "y")

    _, bound = compile_filter(song_filter)

    assert bound == ["%x%", "%y%"]
