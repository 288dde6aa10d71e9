"""Tests for the persisted minutes store."""

import json

from minutescribe.core.minutes_store import (
    STORE_SCHEMA_VERSION,
    MinutesStore,
    SlotStorage,
    decode_minutes,
)


class FailingStorage(SlotStorage):
    """Storage whose writes always fail."""

    def write(self, key, data):
        raise OSError("disk full")


def test_load_missing_slot_is_empty(store):
    """A store with nothing persisted loads as empty."""
    assert store.load() == []
    assert len(store) == 0


def test_add_then_load_round_trip(builder, storage, store, now):
    """A freshly added record loads back field-for-field."""
    record = builder.build("John Smith will call New York. Thanks!", 301, now)
    assert store.add(record) is True

    loaded = MinutesStore(storage).load()
    assert loaded[0] == record
    assert loaded[0].created_at == now
    assert loaded[0].key_topics == ("John Smith", "New York")


def test_newest_first_order(builder, storage, store, now):
    """Records are prepended, so the newest comes first."""
    first = builder.build("first", 60, now)
    second = builder.build("second", 120, now)
    store.add(first)
    store.add(second)

    assert [m.id for m in store] == [second.id, first.id]
    assert MinutesStore(storage).load() == [second, first]


def test_corrupt_slot_loads_empty(storage):
    """Unparseable data degrades to an empty store."""
    storage.write("SavedMinutes", b"{not json")
    assert MinutesStore(storage).load() == []


def test_invalid_record_loads_empty(storage):
    """A document with an invalid record degrades to an empty store."""
    document = {"schema_version": STORE_SCHEMA_VERSION, "minutes": [{"title": ""}]}
    storage.write("SavedMinutes", json.dumps(document).encode())
    assert MinutesStore(storage).load() == []


def test_unknown_schema_version_loads_empty(storage):
    """Data written by a newer schema is not read."""
    document = {"schema_version": STORE_SCHEMA_VERSION + 1, "minutes": []}
    storage.write("SavedMinutes", json.dumps(document).encode())
    assert MinutesStore(storage).load() == []


def test_legacy_bare_list_is_accepted(builder, storage, now):
    """The unversioned layout (a bare list of records) still loads."""
    record = builder.build("We must finish", 0, now)
    storage.write("SavedMinutes", json.dumps([record.to_wire()]).encode())

    assert MinutesStore(storage).load() == [record]


def test_persisted_layout(builder, storage, store, now):
    """The slot holds a versioned envelope with wire-named records."""
    store.add(builder.build("hello", 0, now))

    document = json.loads(storage.path_for("SavedMinutes").read_text(encoding="utf-8"))
    assert document["schema_version"] == STORE_SCHEMA_VERSION
    assert document["minutes"][0]["transcription"] == "hello"


def test_write_failure_keeps_memory_copy(builder, tmp_path, now):
    """Failed writes are reported but the record stays in memory."""
    store = MinutesStore(FailingStorage(tmp_path))
    record = builder.build("hello", 0, now)

    assert store.add(record) is False
    assert store.minutes == (record,)


def test_get_by_id(builder, store, now):
    """Records can be looked up by UUID or its string form."""
    record = builder.build("hello", 0, now)
    store.add(record)

    assert store.get(record.id) == record
    assert store.get(str(record.id)) == record
    assert store.get("not-a-uuid") is None


def test_custom_key(builder, storage, now):
    """Stores with different keys use separate slots."""
    store = MinutesStore(storage, key="Other")
    store.add(builder.build("hello", 0, now))

    assert storage.path_for("Other").exists()
    assert MinutesStore(storage).load() == []


def test_atomic_write_leaves_no_temp_files(storage):
    """Only the slot file remains after a write."""
    storage.write("SavedMinutes", b"[]")
    assert [p.name for p in storage.directory.iterdir()] == ["SavedMinutes.json"]
    assert decode_minutes(storage.read("SavedMinutes")) == []


def test_out_of_range_date_loads_empty(builder, storage, now):
    """A timestamp that cannot be converted to UTC degrades to an empty store."""
    wire = builder.build("hello", 0, now).to_wire()
    wire["date"] = "0001-01-01T00:00:00+05:00"
    document = {"schema_version": STORE_SCHEMA_VERSION, "minutes": [wire]}
    storage.write("SavedMinutes", json.dumps(document).encode())

    assert MinutesStore(storage).load() == []


def test_deeply_nested_slot_loads_empty(storage):
    """JSON too deep for the decoder degrades to an empty store."""
    storage.write("SavedMinutes", b"[" * 100000 + b"]" * 100000)
    assert MinutesStore(storage).load() == []
