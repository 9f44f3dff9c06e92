"""Book store tests."""
from concurrent.futures import ThreadPoolExecutor

import pytest

from app.core.exceptions import InvariantViolationError, NotFoundError
from app.core.utils import IDGenerator
from app.services.book_store import BookStore


def make_book(n: int) -> dict:
    return {"title": f"Title {n}", "author": f"Author {n}", "isbn": f"isbn-{n}"}


@pytest.fixture
def store() -> BookStore:
    return BookStore()


def test_list_empty(store: BookStore):
    assert store.list() == []
    assert len(store) == 0


def test_add_assigns_id(store: BookStore):
    book = store.add({"title": "A", "author": "B", "isbn": "111"})
    assert book.to_dict() == {"id": 1, "title": "A", "author": "B", "isbn": "111"}


def test_add_ignores_candidate_id(store: BookStore):
    book = store.add({"id": 7, **make_book(1)})
    assert book.id == 1


def test_list_keeps_insertion_order(store: BookStore):
    for n in range(5):
        store.add(make_book(n))
    assert [b.title for b in store.list()] == [f"Title {n}" for n in range(5)]


def test_ids_unique_across_deletes(store: BookStore):
    seen = set()
    for n in range(10):
        book = store.add(make_book(n))
        assert book.id not in seen
        seen.add(book.id)
        if n % 3 == 0:
            store.delete_by_id(book.id)
    assert len(seen) == 10


def test_find_index_by_id(store: BookStore):
    ids = [store.add(make_book(n)).id for n in range(3)]
    assert store.find_index_by_id(ids[2]) == 2

    store.delete_by_id(ids[0])
    assert store.find_index_by_id(ids[2]) == 1

    with pytest.raises(NotFoundError) as exc_info:
        store.find_index_by_id(ids[0])
    assert exc_info.value.message == "Book not found"
    assert exc_info.value.details["id"] == ids[0]


def test_get_by_id_returns_copy(store: BookStore):
    book_id = store.add(make_book(1)).id
    book = store.get_by_id(book_id)
    book.title = "changed"
    assert store.get_by_id(book_id).title == "Title 1"


def test_update_round_trip(store: BookStore):
    """Update replaces fields under the original id."""
    book = store.add(make_book(1))
    store.add(make_book(2))
    index = store.find_index_by_id(book.id)

    updated = store.update_by_id(book.id, {"id": 50, **make_book(9)})
    assert updated.id == book.id

    books = store.list()
    assert len(books) == 2
    assert books[index].to_dict() == {"id": book.id, **make_book(9)}


def test_update_unknown_leaves_collection(store: BookStore):
    store.add(make_book(1))
    before = store.list()

    with pytest.raises(NotFoundError):
        store.update_by_id(999, make_book(2))
    assert store.list() == before


def test_delete_removes_exactly_one(store: BookStore):
    ids = [store.add(make_book(n)).id for n in range(3)]

    store.delete_by_id(ids[1])
    assert [b.id for b in store.list()] == [ids[0], ids[2]]

    with pytest.raises(NotFoundError):
        store.delete_by_id(ids[1])
    assert len(store) == 2


def test_duplicate_id_raises_invariant_violation():
    id_gen = IDGenerator()
    store = BookStore(id_gen)
    store.add(make_book(1))
    # Rewind the generator so it hands out id 1 again
    store._id_gen = IDGenerator(start=1)

    with pytest.raises(InvariantViolationError):
        store.add(make_book(2))
    assert len(store) == 1


def test_concurrent_adds_get_unique_ids(store: BookStore):
    with ThreadPoolExecutor(max_workers=8) as pool:
        books = list(pool.map(lambda n: store.add(make_book(n)), range(200)))

    ids = [b.id for b in books]
    assert len(set(ids)) == 200
    assert sorted(ids) == list(range(1, 201))
    assert len(store) == 200


def test_id_generator_peek():
    id_gen = IDGenerator(start=5)
    assert id_gen.peek() == 5
    assert id_gen.next_id() == 5
    assert id_gen.peek() == 6
