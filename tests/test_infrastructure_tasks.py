"""
Tests for the in-memory task repository adapter.

Covers id assignment, lookups, ordering, the update/delete
contract, and id uniqueness under concurrent callers.
"""

import threading
from concurrent.futures import ThreadPoolExecutor

import pytest

from todo_service.domain.tasks.entities import Task, TaskData, TaskId
from todo_service.domain.tasks.errors import TaskRepositoryNotFoundError
from todo_service.infrastructure.tasks.in_memory_task_repository import (
    InMemoryTaskRepositoryAdapter,
)


def _fill(repo: InMemoryTaskRepositoryAdapter, count: int) -> list[Task]:
    return [repo.create(TaskData(task=f"task {i}")) for i in range(1, count + 1)]


class TestCreate:
    """Tests for InMemoryTaskRepositoryAdapter.create."""

    def test_first_id_is_one(self, repository: InMemoryTaskRepositoryAdapter) -> None:
        created = repository.create(TaskData(task="say hello"))
        assert created == Task(id=TaskId(1), task="say hello")

    def test_ids_strictly_increase(self, repository: InMemoryTaskRepositoryAdapter) -> None:
        ids = [t.id.value for t in _fill(repository, 5)]
        assert ids == [1, 2, 3, 4, 5]

    def test_ids_never_reused_after_delete(
        self, repository: InMemoryTaskRepositoryAdapter
    ) -> None:
        first, second = _fill(repository, 2)
        repository.delete(second.id)
        repository.delete(first.id)

        third = repository.create(TaskData(task="again"))

        assert third.id == TaskId(3)

    def test_empty_description_is_stored_as_is(
        self, repository: InMemoryTaskRepositoryAdapter
    ) -> None:
        # Validation belongs to the service; the store never rejects content.
        created = repository.create(TaskData(task=""))
        assert repository.get(created.id).task == ""


class TestGetAndList:
    """Tests for get and list."""

    def test_get_returns_stored_task(self, repository: InMemoryTaskRepositoryAdapter) -> None:
        created = repository.create(TaskData(task="say hello"))
        assert repository.get(created.id) == created

    def test_get_unknown_id_raises_with_id(
        self, repository: InMemoryTaskRepositoryAdapter
    ) -> None:
        _fill(repository, 5)

        with pytest.raises(TaskRepositoryNotFoundError) as exc_info:
            repository.get(TaskId(999))

        assert exc_info.value.task_id == TaskId(999)

    def test_list_empty(self, repository: InMemoryTaskRepositoryAdapter) -> None:
        assert repository.list() == []

    def test_list_ordered_by_id_after_mixed_operations(
        self, repository: InMemoryTaskRepositoryAdapter
    ) -> None:
        tasks = _fill(repository, 6)
        repository.delete(tasks[0].id)
        repository.delete(tasks[3].id)
        repository.update(Task(id=tasks[5].id, task="changed"))
        repository.create(TaskData(task="latest"))

        listed = repository.list()

        assert [t.id.value for t in listed] == [2, 3, 5, 6, 7]
        assert listed[3].task == "changed"

    def test_list_returns_copies(self, repository: InMemoryTaskRepositoryAdapter) -> None:
        repository.create(TaskData(task="say hello"))
        listed = repository.list()
        listed.clear()
        assert len(repository.list()) == 1


class TestUpdateAndDelete:
    """Tests for update and delete."""

    def test_update_replaces_description_only(
        self, repository: InMemoryTaskRepositoryAdapter
    ) -> None:
        created = repository.create(TaskData(task="say hello"))

        repository.update(Task(id=created.id, task="say bye"))

        assert repository.get(created.id) == Task(id=created.id, task="say bye")

    def test_update_unknown_id_does_not_insert(
        self, repository: InMemoryTaskRepositoryAdapter
    ) -> None:
        with pytest.raises(TaskRepositoryNotFoundError) as exc_info:
            repository.update(Task(id=TaskId(5), task="ghost"))

        assert exc_info.value.task_id == TaskId(5)
        assert repository.list() == []

    def test_update_does_not_move_counter(
        self, repository: InMemoryTaskRepositoryAdapter
    ) -> None:
        created = repository.create(TaskData(task="say hello"))
        repository.update(Task(id=created.id, task="again"))
        assert repository.create(TaskData(task="next")).id == TaskId(2)

    def test_delete_removes(self, repository: InMemoryTaskRepositoryAdapter) -> None:
        created = repository.create(TaskData(task="say hello"))

        repository.delete(created.id)

        with pytest.raises(TaskRepositoryNotFoundError):
            repository.get(created.id)

    def test_delete_twice_raises(self, repository: InMemoryTaskRepositoryAdapter) -> None:
        created = repository.create(TaskData(task="say hello"))
        repository.delete(created.id)

        with pytest.raises(TaskRepositoryNotFoundError) as exc_info:
            repository.delete(created.id)

        assert exc_info.value.task_id == created.id


class TestConcurrency:
    """The store behaves as if guarded by a single lock."""

    def test_concurrent_creates_never_duplicate_ids(
        self, repository: InMemoryTaskRepositoryAdapter
    ) -> None:
        workers, per_worker = 8, 200
        start = threading.Barrier(workers)

        def create_many(worker: int) -> list[int]:
            start.wait()
            return [
                repository.create(TaskData(task=f"{worker}-{i}")).id.value
                for i in range(per_worker)
            ]

        with ThreadPoolExecutor(max_workers=workers) as pool:
            results = list(pool.map(create_many, range(workers)))

        ids = [i for chunk in results for i in chunk]
        assert len(ids) == len(set(ids)) == workers * per_worker
        assert sorted(ids) == list(range(1, workers * per_worker + 1))
        for chunk in results:
            assert chunk == sorted(chunk)

    def test_list_sees_whole_operations_only(
        self, repository: InMemoryTaskRepositoryAdapter
    ) -> None:
        stop = threading.Event()
        snapshots: list[list[Task]] = []

        def churn() -> None:
            while not stop.is_set():
                created = repository.create(TaskData(task="temp"))
                repository.update(Task(id=created.id, task="temp-updated"))
                repository.delete(created.id)

        def observe() -> None:
            for _ in range(500):
                snapshots.append(repository.list())

        writer = threading.Thread(target=churn)
        writer.start()
        try:
            observe()
        finally:
            stop.set()
            writer.join()

        for snapshot in snapshots:
            assert len(snapshot) <= 1
            for task in snapshot:
                assert task.task in ("temp", "temp-updated")
