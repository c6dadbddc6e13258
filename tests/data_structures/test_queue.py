import pytest

from kindred.data_structures.kinds import Kind
from kindred.data_structures.queue import Queue
from kindred.exceptions import EmptyCollectionError, InvalidCountError, InvalidKindError, InvalidTypeError


@pytest.fixture
def queue() -> Queue[int]:
    return Queue()


@pytest.fixture
def elements() -> list[int]:
    return [1, 2, 3]


def test_push(queue: Queue[int], elements: list[int]):
    """Test basic enqueue operation."""
    queue.push(elements[0])
    assert queue.size == 1
    assert not queue.is_empty
    assert queue.kind == Kind.INT

    queue.push(*elements[1:])

    assert queue.size == 3
    assert queue.to_list() == [1, 2, 3]


def test_push_rejected_kind(queue: Queue[int]):
    """Test enqueuing a composite value into an empty queue."""
    with pytest.raises(InvalidTypeError, match="map is not a supported type for queue"):
        queue.push({"a": 1})
    assert queue.is_empty
    assert queue.kind is None


def test_push_batch_is_atomic(queue: Queue[int]):
    """Test that a failing batch enqueues nothing."""
    queue.push(0)
    with pytest.raises(InvalidKindError):
        queue.push(1, 2, 3.0)
    assert queue.to_list() == [0]


def test_fifo_order(queue: Queue[int], elements: list[int]):
    """Test that the first pushed element is at the front."""
    queue.push(*elements)
    assert queue.front() == 1
    queue.pop()
    assert queue.front() == 2


def test_pop(queue: Queue[int], elements: list[int]):
    """Test basic dequeue operation."""
    queue.push(*elements)

    val = queue.pop()
    assert queue.size == 2
    assert val == 1

    val = queue.pop()
    assert queue.size == 1
    assert val == 2


def test_empty_pop(queue: Queue[int]):
    """Test removing from empty data structure."""
    with pytest.raises(EmptyCollectionError, match="queue is empty"):
        queue.pop()
    assert queue.is_empty


def test_pop_n(queue: Queue[int], elements: list[int]):
    """Test dequeuing several elements at once."""
    queue.push(*elements)
    assert queue.pop_n(2) == [1, 2]
    assert queue.to_list() == [3]


@pytest.mark.parametrize("count", [4, -1])
def test_pop_n_invalid_count(queue: Queue[int], elements: list[int], count: int):
    """Test dequeuing more elements than the queue holds, or a negative count."""
    queue.push(*elements)
    with pytest.raises(InvalidCountError, match="pop count"):
        queue.pop_n(count)
    assert queue.to_list() == elements


def test_front(queue: Queue[int], elements: list[int]):
    """Test front operation."""
    queue.push(*elements)

    val = queue.front()
    assert queue.size == 3  # Size unchanged
    assert val == 1


def test_empty_front(queue: Queue[int]):
    """Test peeking empty data structure."""
    with pytest.raises(EmptyCollectionError):
        queue.front()


def test_front_n(queue: Queue[int], elements: list[int]):
    """Test peeking several elements in queue order."""
    queue.push(*elements)
    assert queue.front_n(2) == [1, 2]
    assert queue.front_n(0) == []
    assert queue.size == 3
    with pytest.raises(InvalidCountError, match="greater than the queue size"):
        queue.front_n(4)


def test_front_and_pop(queue: Queue[int], elements: list[int]):
    """Test combined peek and dequeue."""
    queue.push(*elements)
    assert queue.front_and_pop() == 1
    assert queue.to_list() == [2, 3]

    queue.clear()
    with pytest.raises(EmptyCollectionError):
        queue.front_and_pop()


def test_front_n_and_pop_n(queue: Queue[int], elements: list[int]):
    """Test combined bulk peek and dequeue, which must not mutate on failure."""
    queue.push(*elements)
    with pytest.raises(InvalidCountError):
        queue.front_n_and_pop_n(4)
    assert queue.to_list() == elements

    assert queue.front_n_and_pop_n(2) == [1, 2]
    assert queue.to_list() == [3]


def test_search(queue: Queue[str]):
    """Test searching measures distance from the front."""
    queue.push("a", "b", "c", "b")
    assert queue.search("a") == 1
    assert queue.search("b") == 2
    assert queue.search("c") == 3
    assert queue.search("z") == -1


def test_remove_all_keeps_kind(queue: Queue[int], elements: list[int]):
    """Test that remove_all empties the queue but keeps the locked kind."""
    queue.push(*elements)
    queue.remove_all()

    assert queue.is_empty
    with pytest.raises(InvalidKindError):
        queue.push("a")


def test_clear(queue: Queue[int], elements: list[int]):
    """Test clear operation."""
    queue.push(*elements)
    queue.clear()

    assert queue.is_empty
    assert queue.kind is None
    queue.push("a")
    assert queue.front() == "a"


def test_aliases(queue: Queue[int]):
    """Test the generic add/remove names."""
    queue.add(1, 2)
    assert queue.remove() == 1
    assert queue.to_list() == [2]


def test_search_ignores_other_kinds():
    """Test that search and membership do not match equal values of another kind."""
    queue = Queue([1.0, 2.0])
    assert queue.search(1) == -1
    assert queue.search(1.0) == 1
    assert 2 not in queue
    assert 2.0 in queue


@pytest.mark.parametrize("count", [True, 1.0, "1"])
def test_front_n_non_int_count(count):
    """Test that bulk counts must be ints and leave the queue untouched."""
    queue = Queue([1, 2])
    with pytest.raises(InvalidCountError, match="must be an int"):
        queue.front_n(count)
    with pytest.raises(InvalidCountError, match="must be an int"):
        queue.pop_n(count)
    assert queue.to_list() == [1, 2]
