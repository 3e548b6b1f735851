import pytest

from dsalab.direct_access import (
    RECORD_SIZE,
    DirectAccessFile,
    DirectRecord,
    RecordNotFoundError,
)


@pytest.fixture
def store(tmp_path):
    return DirectAccessFile(tmp_path / "StudentDirect.txt")


def test_record_size_matches_int_plus_name():
    packed = DirectRecord(1, "Asha").pack()
    assert len(packed) == 24
    assert len(packed) == RECORD_SIZE


def test_positions_are_record_multiples(store):
    assert store.position(1) == 0
    assert store.position(2) == RECORD_SIZE
    assert store.position(5) - store.position(4) == RECORD_SIZE


def test_position_rejects_nonpositive(store):
    with pytest.raises(ValueError):
        store.position(0)


def test_insert_and_read_round_trip(store):
    store.insert(DirectRecord(3, "Asha"))
    assert store.read(3) == DirectRecord(3, "Asha")


def test_insert_places_record_at_its_slot(store):
    store.insert(DirectRecord(2, "Ravi"))
    data = store.path.read_bytes()
    assert len(data) == 2 * RECORD_SIZE
    assert data[:RECORD_SIZE] == bytes(RECORD_SIZE)
    assert data[RECORD_SIZE:RECORD_SIZE + 4] == (2).to_bytes(4, "little")


def test_pack_unpack_round_trip():
    record = DirectRecord(9, "Meera")
    assert DirectRecord.unpack(record.pack()) == record


def test_read_gap_slot_not_found(store):
    store.insert(DirectRecord(4, "Asha"))
    with pytest.raises(RecordNotFoundError):
        store.read(2)


def test_read_beyond_end_not_found(store):
    store.insert(DirectRecord(1, "Asha"))
    with pytest.raises(RecordNotFoundError):
        store.read(10)


def test_read_missing_file(store):
    with pytest.raises(FileNotFoundError):
        store.read(1)


def test_delete_then_read_fails(store):
    store.insert(DirectRecord(1, "Asha"))
    store.insert(DirectRecord(2, "Ravi"))
    assert store.delete(1) == DirectRecord(1, "Asha")
    with pytest.raises(RecordNotFoundError):
        store.read(1)
    assert store.read(2) == DirectRecord(2, "Ravi")


def test_delete_twice_fails(store):
    store.insert(DirectRecord(1, "Asha"))
    store.delete(1)
    with pytest.raises(RecordNotFoundError):
        store.delete(1)


def test_reinsert_after_delete(store):
    store.insert(DirectRecord(1, "Asha"))
    store.delete(1)
    store.insert(DirectRecord(1, "Ravi"))
    assert store.read(1) == DirectRecord(1, "Ravi")


def test_not_found_is_key_error(store):
    store.insert(DirectRecord(1, "Asha"))
    with pytest.raises(KeyError):
        store.delete(3)


def test_long_name_rejected():
    with pytest.raises(ValueError):
        DirectRecord(1, "x" * 20)