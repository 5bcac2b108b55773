"""Tests for the employee record stores.

The same behavior is checked for the SQLite repository and the
in-memory one.
"""
import pytest

from app.infrastructure.repositories import EmployeeRepository, InMemoryEmployeeRepository
from app.models import Employee


@pytest.fixture(params=["sqlite", "memory"])
def repo(request, db_connection):
    """Create each record store on a fresh database."""
    if request.param == "sqlite":
        return EmployeeRepository(db_connection)
    return InMemoryEmployeeRepository()


def make(name="ravi", email="ravi@gmail.com", role="developer") -> Employee:
    return Employee(name=name, email=email, role=role)


# =============================================================================
# save / save_all
# =============================================================================

def test_save_assigns_id(repo):
    saved = repo.save(make())

    assert saved.id == 1
    assert saved.name == "ravi"


def test_save_does_not_mutate_argument(repo):
    employee = make()

    repo.save(employee)

    assert employee.id is None


def test_save_assigns_sequential_ids(repo):
    first = repo.save(make())
    second = repo.save(make("arun", "arun@gmail.com", "tester"))

    assert (first.id, second.id) == (1, 2)


def test_save_existing_overwrites(repo):
    saved = repo.save(make())
    saved.name = "ramesh"
    saved.email = "ramesh@gmail.com"

    repo.save(saved)

    stored = repo.find_by_id(saved.id)
    assert stored.name == "ramesh"
    assert stored.email == "ramesh@gmail.com"
    assert len(repo.find_all()) == 1


def test_save_with_unknown_id_inserts_under_that_id(repo):
    repo.save(Employee(id=7, name="ravi", email="ravi@gmail.com", role="developer"))

    assert repo.find_by_id(7).name == "ravi"
    assert repo.save(make("arun", "arun@gmail.com", "tester")).id == 8


def test_save_all_returns_saved_in_order(repo):
    saved = repo.save_all([make(), make("arun", "arun@gmail.com", "tester")])

    assert [e.id for e in saved] == [1, 2]
    assert [e.name for e in saved] == ["ravi", "arun"]


def test_save_all_empty(repo):
    assert repo.save_all([]) == []
    assert repo.find_all() == []


# =============================================================================
# find_all / find_by_id
# =============================================================================

def test_find_all_returns_every_record(repo):
    repo.save_all([make(), make("arun", "arun@gmail.com", "tester")])

    employees = repo.find_all()

    assert len(employees) == 2
    assert employees[1] == Employee(id=2, name="arun", email="arun@gmail.com", role="tester")


def test_find_by_id_missing(repo):
    repo.save(make())

    assert repo.find_by_id(2) is None


def test_find_by_id_out_of_range(repo):
    repo.save(make())

    assert repo.find_by_id(2 ** 64) is None
    assert repo.find_by_id(-(2 ** 64)) is None


def test_find_by_id_returns_copy(repo):
    saved = repo.save(make())

    found = repo.find_by_id(saved.id)
    found.name = "changed"

    assert repo.find_by_id(saved.id).name == "ravi"


# =============================================================================
# delete
# =============================================================================

def test_delete_removes_record(repo):
    saved = repo.save(make())

    repo.delete(saved)

    assert repo.find_by_id(saved.id) is None
    assert repo.find_all() == []


def test_delete_missing_is_noop(repo):
    repo.save(make())

    repo.delete(Employee(id=42, name="ghost", email="ghost@gmail.com", role="none"))
    repo.delete(make("unsaved", "unsaved@gmail.com", "none"))

    assert len(repo.find_all()) == 1


def test_ids_not_reused_after_delete(repo):
    first = repo.save(make())
    repo.delete(first)

    second = repo.save(make("arun", "arun@gmail.com", "tester"))

    assert second.id == 2


def test_sqlite_records_survive_reconnect(fresh_database):
    """Records written through one connection are read through another."""
    from app.database import close_db, get_db

    EmployeeRepository(get_db()).save(make())
    close_db()

    employees = EmployeeRepository(get_db()).find_all()

    assert [e.name for e in employees] == ["ravi"]
