"""Tests for the JSON-file product repository."""

import json

import pytest

from supermarket.domain.exceptions import PersistenceError
from supermarket.domain.model.value_objects import Email
from supermarket.domain.result import failure, success
from supermarket.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)
from tests.fakes import make_product


def _read(path):
    return json.loads(path.read_text(encoding="utf-8"))


class TestJsonProductRepository:

    def test_creates_empty_file(self, tmp_path):
        path = tmp_path / "data" / "products.json"
        JsonProductRepository(path)
        assert _read(path) == []

    def test_add_is_not_durable_until_commit(self, tmp_path):
        path = tmp_path / "products.json"
        repo = JsonProductRepository(path)

        assert repo.add(make_product(product_id=1)) == success()
        assert repo.find(1) is not None
        assert _read(path) == []

        repo.commit()
        assert [r["product_id"] for r in _read(path)] == [1]

    def test_round_trip_through_new_instance(self, tmp_path):
        path = tmp_path / "products.json"
        product = make_product(product_id=7, quantity=3)
        product.importer_email = Email("imports@dairy.example")
        repo = JsonProductRepository(path)
        repo.add(product)
        repo.commit()

        loaded = JsonProductRepository(path).find(7)
        assert loaded == product

    def test_duplicate_add_fails(self, tmp_path):
        path = tmp_path / "products.json"
        repo = JsonProductRepository(path)
        repo.add(make_product(product_id=1))
        repo.commit()

        other = JsonProductRepository(path)
        assert other.add(make_product(product_id=1)) == failure(
            "Product with id 1 already exists"
        )

    def test_in_place_changes_saved_on_commit(self, tmp_path):
        path = tmp_path / "products.json"
        repo = JsonProductRepository(path)
        repo.add(make_product(product_id=1, quantity=5))
        repo.add(make_product(product_id=2, quantity=9, name="Bread"))
        repo.commit()

        session = JsonProductRepository(path)
        session.find(1).remove_stock(3)
        assert _read(path)[0]["quantity"] == 5

        session.commit()
        records = {r["product_id"]: r for r in _read(path)}
        assert records[1]["quantity"] == 2
        assert records[2]["quantity"] == 9

    def test_find_unknown_returns_none(self, tmp_path):
        assert JsonProductRepository(tmp_path / "products.json").find(1) is None

    def test_list_all_includes_staged(self, tmp_path):
        path = tmp_path / "products.json"
        repo = JsonProductRepository(path)
        repo.add(make_product(product_id=1))
        repo.commit()
        repo.add(make_product(product_id=2))
        assert sorted(p.product_id for p in repo.list_all()) == [1, 2]

    def test_corrupt_file_raises_persistence_error(self, tmp_path):
        path = tmp_path / "products.json"
        path.write_text("{not json", encoding="utf-8")
        repo = JsonProductRepository(path)
        with pytest.raises(PersistenceError, match="Cannot read"):
            repo.find(1)


def _fail_next_write(monkeypatch, repo):
    """Make the next write of *repo* fail; later writes go through."""
    real_persist = repo._persist_raw
    calls = []

    def persist(records):
        calls.append(records)
        if len(calls) == 1:
            raise PersistenceError("Disk full")
        real_persist(records)

    monkeypatch.setattr(repo, "_persist_raw", persist)


class TestJsonProductRepositoryCommitFailure:

    def test_failed_change_is_not_written_by_next_commit(self, tmp_path, monkeypatch):
        path = tmp_path / "products.json"
        seed = JsonProductRepository(path)
        seed.add(make_product(product_id=1, quantity=5))
        seed.add(make_product(product_id=2, quantity=5, name="Bread"))
        seed.commit()

        repo = JsonProductRepository(path)
        _fail_next_write(monkeypatch, repo)

        repo.find(1).remove_stock(3)
        with pytest.raises(PersistenceError, match="Disk full"):
            repo.commit()

        assert repo.find(1).quantity == 5

        repo.find(2).remove_stock(1)
        repo.commit()

        records = {r["product_id"]: r for r in _read(path)}
        assert records[1]["quantity"] == 5
        assert records[2]["quantity"] == 4

    def test_failed_add_can_be_retried(self, tmp_path, monkeypatch):
        path = tmp_path / "products.json"
        repo = JsonProductRepository(path)
        _fail_next_write(monkeypatch, repo)

        repo.add(make_product(product_id=1))
        with pytest.raises(PersistenceError):
            repo.commit()
        assert repo.find(1) is None

        assert repo.add(make_product(product_id=1)) == success()
        repo.commit()
        assert [r["product_id"] for r in _read(path)] == [1]


class TestJsonProductRepositoryAcrossRequests:

    def _seed(self, path):
        repo = JsonProductRepository(path)
        repo.add(make_product(product_id=1, quantity=5))
        repo.add(make_product(product_id=2, quantity=5, name="Bread"))
        repo.commit()

    def test_products_only_read_are_not_rewritten(self, tmp_path):
        path = tmp_path / "products.json"
        self._seed(path)
        first = JsonProductRepository(path)
        second = JsonProductRepository(path)

        first.find(1)
        second.find(1).remove_stock(3)
        second.commit()
        first.find(2).remove_stock(1)
        first.commit()

        records = {r["product_id"]: r for r in _read(path)}
        assert records[1]["quantity"] == 2
        assert records[2]["quantity"] == 4

    def test_find_after_commit_sees_other_writers(self, tmp_path):
        path = tmp_path / "products.json"
        self._seed(path)
        first = JsonProductRepository(path)
        second = JsonProductRepository(path)

        first.find(1).remove_stock(1)
        first.commit()
        second.find(1).remove_stock(2)
        second.commit()

        assert first.find(1).quantity == 2

    def test_unmodified_find_reloads_from_disk(self, tmp_path):
        path = tmp_path / "products.json"
        self._seed(path)
        reader = JsonProductRepository(path)
        writer = JsonProductRepository(path)

        assert reader.find(1).quantity == 5
        writer.find(1).remove_stock(4)
        writer.commit()

        assert reader.find(1).quantity == 1

    def test_commit_with_nothing_pending_leaves_file_untouched(self, tmp_path):
        path = tmp_path / "products.json"
        self._seed(path)
        repo = JsonProductRepository(path)
        repo.find(1)
        path.write_text("[]", encoding="utf-8")

        repo.commit()

        assert _read(path) == []
