import sqlite3
from collections import namedtuple
from dataclasses import dataclass

import pytest
from pydantic import BaseModel
from piper import pick, picker


@dataclass
class Point:
    x: int
    y: int


class Asset(BaseModel):
    symbol: str


Pair = namedtuple("Pair", ["left", "right"])


def test_pick_direct():
    obj = {"foo": "bar", "baz": 1}
    assert pick("foo", obj) == "bar"
    assert pick("baz", obj) == 1


def test_pick_curried_matches_direct():
    obj = {"foo": "bar", "baz": 1}
    assert pick("foo")(obj) == pick("foo", obj)
    assert picker("baz")(obj) == pick("baz", obj)


def test_pick_missing_key_is_none():
    assert pick("nope", {"foo": "bar"}) is None
    assert pick("nope")({}) is None


def test_pick_attribute():
    assert pick("y", Point(1, 2)) == 2
    assert pick("symbol", Asset(symbol="AAPL")) == "AAPL"
    assert pick("right", Pair("a", "b")) == "b"
    assert pick("z", Point(1, 2)) is None


def test_pick_index():
    items = ["a", "b", "c"]
    assert pick(0, items) == "a"
    assert pick(-1)(items) == "c"
    assert pick(3, items) is None


def test_pick_non_string_mapping_key():
    assert pick(1, {1: "one"}) == "one"
    assert pick((0, 0), {(0, 0): "origin"}) == "origin"


def test_pick_on_none_is_direct_lookup():
    assert pick("foo", None) is None


def test_pick_unsubscriptable_propagates():
    with pytest.raises(TypeError):
        pick(0, 42)


def test_picker_name():
    assert picker("foo").__name__ == "pick('foo')"


class Record:
    def __init__(self, data):
        self._data = data

    def __getitem__(self, key):
        return self._data[key]


@pytest.fixture
def sqlite_row():
    connection = sqlite3.connect(":memory:")
    connection.row_factory = sqlite3.Row
    row = connection.execute("SELECT 'baz' AS foo, 1 AS qux").fetchone()
    yield row
    connection.close()


def test_pick_subscriptable_record():
    record = Record({"foo": "bar"})
    assert pick("foo", record) == "bar"
    assert pick("foo")(record) == "bar"
    assert pick("missing", record) is None


def test_pick_sqlite_row(sqlite_row):
    assert pick("foo", sqlite_row) == "baz"
    assert pick("qux")(sqlite_row) == 1
    assert pick("missing", sqlite_row) is None


def test_pick_string_key_on_sequence_is_none():
    assert pick("foo", ["a", "b"]) is None
