import pytest

from dsalab.student_file import Student, StudentFile


@pytest.fixture
def store(tmp_path):
    return StudentFile(tmp_path / "Students.txt")


def test_add_writes_four_lines(store):
    store.add(Student(7, "Asha", "A", "Pune"))
    assert store.path.read_text(encoding="utf-8") == "7\nAsha\nA\nPune\n"


def test_records_round_trip(store):
    students = [Student(1, "Asha", "A", "Pune"), Student(2, "Ravi", "B", "Nashik")]
    for student in students:
        store.add(student)
    assert store.records() == students


def test_find_existing(store):
    store.add(Student(1, "Asha", "A", "Pune"))
    store.add(Student(2, "Ravi", "B", "Nashik"))
    assert store.find(2) == Student(2, "Ravi", "B", "Nashik")


def test_find_missing_returns_none(store):
    store.add(Student(1, "Asha", "A", "Pune"))
    assert store.find(5) is None


def test_find_without_file_raises(store):
    with pytest.raises(FileNotFoundError):
        store.find(1)


def test_delete_removes_record(store):
    store.add(Student(1, "Asha", "A", "Pune"))
    store.add(Student(2, "Ravi", "B", "Nashik"))
    removed = store.delete(1)
    assert removed == [Student(1, "Asha", "A", "Pune")]
    assert store.records() == [Student(2, "Ravi", "B", "Nashik")]


def test_delete_removes_all_duplicates(store):
    store.add(Student(3, "Asha", "A", "Pune"))
    store.add(Student(4, "Ravi", "B", "Nashik"))
    store.add(Student(3, "Meera", "C", "Satara"))
    removed = store.delete(3)
    assert [s.name for s in removed] == ["Asha", "Meera"]
    assert [s.roll_number for s in store.records()] == [4]


def test_delete_missing_raises_and_keeps_file(store):
    store.add(Student(1, "Asha", "A", "Pune"))
    before = store.path.read_text(encoding="utf-8")
    with pytest.raises(KeyError):
        store.delete(9)
    assert store.path.read_text(encoding="utf-8") == before


def test_delete_without_file_raises(store):
    with pytest.raises(FileNotFoundError):
        store.delete(1)


def test_delete_leaves_no_temp_files(store):
    store.add(Student(1, "Asha", "A", "Pune"))
    store.delete(1)
    assert [p.name for p in store.path.parent.iterdir()] == ["Students.txt"]


def test_reading_stops_at_unreadable_roll(store):
    store.path.write_text("1\nAsha\nA\nPune\nbroken\nx\ny\nz\n", encoding="utf-8")
    assert store.records() == [Student(1, "Asha", "A", "Pune")]


def test_truncated_record_fills_blanks(store):
    store.path.write_text("5\nAsha\n", encoding="utf-8")
    assert store.records() == [Student(5, "Asha", "", "")]


def test_multiline_field_rejected():
    with pytest.raises(ValueError):
        Student(1, "Asha\nX", "A", "Pune")