"""History store tests."""

from __future__ import annotations

import json

import pytest

from modules.services.history_service import (
    MAX_FIELD_LENGTH,
    QUOTA_WARNING,
    TRUNCATION_MARKER,
    HistoryItem,
    HistoryService,
    HistoryStorageError,
    HistoryType,
    InMemoryHistoryRepository,
    JsonFileHistoryRepository,
    StorageQuotaExceeded,
)


class FailingRepository(InMemoryHistoryRepository):
    """Repository whose writes always fail."""

    def __init__(self) -> None:
        super().__init__()
        self.save_calls = 0

    def save(self, items):
        self.save_calls += 1
        raise StorageQuotaExceeded("quota exceeded")


def build_service(**kwargs) -> HistoryService:
    return HistoryService(InMemoryHistoryRepository(), **kwargs)


def test_add_assigns_id_and_timestamp():
    service = build_service()
    item = service.add("abcd", "YWJjZA==", HistoryType.ENCODE)

    assert item.id
    assert item.timestamp > 0
    assert item.type is HistoryType.ENCODE
    assert service.items() == [item]


def test_add_accepts_plain_type_string():
    item = build_service().add("YWJjZA==", "abcd", "decode")
    assert item.type is HistoryType.DECODE


def test_keeps_fifty_most_recent_first():
    service = build_service()
    for index in range(51):
        service.add(f"input-{index}", f"output-{index}", HistoryType.ENCODE)

    items = service.items()
    assert len(items) == 50
    assert items[0].input == "input-50"
    assert items[-1].input == "input-1"
    assert all(item.input != "input-0" for item in items)


def test_long_fields_are_truncated():
    service = build_service()
    item = service.add("x" * 1500, "y" * 1500, HistoryType.ENCODE)

    assert item.input == "x" * MAX_FIELD_LENGTH + TRUNCATION_MARKER
    assert item.output == "y" * MAX_FIELD_LENGTH + TRUNCATION_MARKER


def test_short_fields_are_untouched():
    item = build_service().add("x" * MAX_FIELD_LENGTH, "y", HistoryType.ENCODE)
    assert item.input == "x" * MAX_FIELD_LENGTH


def test_search_is_case_insensitive_over_input_and_output():
    service = build_service()
    hello = service.add("Hello", "SGVsbG8=", HistoryType.ENCODE)
    world = service.add("d29ybGQ=", "World", HistoryType.DECODE)

    assert service.search("hello") == [hello]
    assert service.search("WORLD") == [world]
    assert service.search("sgvs") == [hello]
    assert service.search("missing") == []


def test_empty_search_returns_full_list_in_order():
    service = build_service()
    for index in range(3):
        service.add(str(index), str(index), HistoryType.ENCODE)

    assert service.search("") == service.items()
    assert service.search("   ") == service.items()


def test_delete_and_clear():
    service = build_service()
    first = service.add("a", "YQ==", HistoryType.ENCODE)
    second = service.add("b", "Yg==", HistoryType.ENCODE)

    assert service.delete(first.id) is True
    assert service.delete(first.id) is False
    assert service.items() == [second]
    assert service.get(second.id) == second

    service.clear()
    assert service.items() == []


def test_every_change_is_persisted(tmp_path):
    path = tmp_path / "history.json"
    service = HistoryService(JsonFileHistoryRepository(path))
    item = service.add("abcd", "YWJjZA==", HistoryType.ENCODE)

    stored = json.loads(path.read_text(encoding="utf-8"))
    assert stored == [item.to_dict()]
    assert stored[0]["type"] == "encode"

    service.delete(item.id)
    assert json.loads(path.read_text(encoding="utf-8")) == []


def test_history_reloads_from_file(tmp_path):
    path = tmp_path / "history.json"
    first = HistoryService(JsonFileHistoryRepository(path))
    first.add("abcd", "YWJjZA==", HistoryType.ENCODE)

    second = HistoryService(JsonFileHistoryRepository(path))
    assert second.items() == first.items()


@pytest.mark.parametrize("content", [b"{not json", b'{"an": "object"}', b'[{"id": "\xff\xfe"}]'])
def test_unreadable_history_loads_empty(tmp_path, content):
    path = tmp_path / "history.json"
    path.write_bytes(content)

    assert JsonFileHistoryRepository(path).load() == []


def test_malformed_entries_are_skipped(tmp_path):
    path = tmp_path / "history.json"
    good = HistoryItem(id="1", timestamp=1, input="a", output="YQ==", type=HistoryType.ENCODE)
    path.write_text(json.dumps([good.to_dict(), {"input": "no id"}]), encoding="utf-8")

    assert JsonFileHistoryRepository(path).load() == [good]


def test_quota_is_enforced_by_file_repository(tmp_path):
    repository = JsonFileHistoryRepository(tmp_path / "history.json", max_bytes=64)
    item = HistoryItem(id="1", timestamp=1, input="a" * 100, output="", type=HistoryType.ENCODE)

    with pytest.raises(StorageQuotaExceeded):
        repository.save([item])
    assert issubclass(StorageQuotaExceeded, HistoryStorageError)


def test_write_failure_warns_once_and_keeps_memory():
    repository = FailingRepository()
    service = HistoryService(repository)

    service.add("a", "YQ==", HistoryType.ENCODE)
    assert service.consume_warning() == QUOTA_WARNING
    assert service.consume_warning() is None

    service.add("b", "Yg==", HistoryType.ENCODE)
    assert service.consume_warning() is None
    assert [item.input for item in service.items()] == ["b", "a"]
    assert repository.save_calls == 2


def test_repository_append_and_evict():
    repository = InMemoryHistoryRepository()
    for index in range(5):
        repository.append(
            HistoryItem(id=str(index), timestamp=index, input="", output="", type=HistoryType.ENCODE),
            limit=3,
        )
    assert [item.id for item in repository.load()] == ["4", "3", "2"]

    assert [item.id for item in repository.evict(limit=1)] == ["4"]
    assert len(repository.load()) == 1


def test_service_starts_empty_on_undecodable_file(tmp_path):
    path = tmp_path / "history.json"
    path.write_bytes(b'[{"id": "\xff\xfe"}]')

    assert HistoryService(JsonFileHistoryRepository(path)).items() == []
