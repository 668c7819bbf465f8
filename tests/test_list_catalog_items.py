"""Tests for the paged catalog item listing use case.

The store is an in-memory double that evaluates the query specifications,
so these tests pin the use case contract without a database.
"""

from __future__ import annotations

import logging
from unittest.mock import MagicMock

import pytest

from conftest import CATALOG_BASE_URL, InMemoryItemStore, make_item
from publicapi.domains.catalog.services.mappers import map_catalog_item_to_out
from publicapi.domains.catalog.services.uri_composer import PLACEHOLDER_BASE_URL, UriComposer
from publicapi.domains.catalog.usecases.catalog_items.list_catalog_items import execute
from publicapi.schemas.catalog_items import ListPagedCatalogItemRequest

USECASE_LOGGER = "pubapi.catalog.list_catalog_items"


@pytest.fixture
def composer():
    return UriComposer(CATALOG_BASE_URL)


def _request(**kwargs) -> ListPagedCatalogItemRequest:
    kwargs.setdefault("correlation_id", "cid-test")
    return ListPagedCatalogItemRequest(**kwargs)


class TestPageCount:
    def test_no_page_size_and_no_rows(self, composer):
        store = InMemoryItemStore([])

        result = execute(store, _request(), uri_composer=composer)

        assert result.page_count == 0
        assert result.catalog_items == []

    def test_page_size_zero_and_no_rows(self, composer):
        store = InMemoryItemStore([])

        result = execute(store, _request(page_size=0, page_index=0), uri_composer=composer)

        assert result.page_count == 0
        assert result.catalog_items == []

    def test_page_size_zero_returns_every_row_in_one_page(self, composer):
        store = InMemoryItemStore([make_item(i) for i in range(1, 8)])

        result = execute(store, _request(page_size=0, page_index=0), uri_composer=composer)

        assert result.page_count == 1
        assert [dto.id for dto in result.catalog_items] == list(range(1, 8))

    @pytest.mark.parametrize(
        "total, page_size, expected",
        [(10, 3, 4), (9, 3, 3), (1, 5, 1), (5, 1, 5), (0, 4, 0)],
    )
    def test_ceil_of_total_over_page_size(self, composer, total, page_size, expected):
        store = InMemoryItemStore([make_item(i) for i in range(1, total + 1)])

        result = execute(store, _request(page_size=page_size, page_index=0), uri_composer=composer)

        assert result.page_count == expected

    def test_page_count_ignores_page_index(self, composer):
        store = InMemoryItemStore([make_item(i) for i in range(1, 11)])

        result = execute(store, _request(page_size=3, page_index=3), uri_composer=composer)

        assert result.page_count == 4
        assert [dto.id for dto in result.catalog_items] == [10]


class TestPaging:
    def test_first_page_of_five(self, composer):
        store = InMemoryItemStore([make_item(i) for i in range(1, 6)])

        result = execute(store, _request(page_index=0, page_size=2), uri_composer=composer)

        (spec,) = store.list_calls
        assert spec.skip == 0
        assert spec.take == 2
        assert len(result.catalog_items) == 2
        assert result.page_count == 3

    def test_skip_is_page_index_times_page_size(self, composer):
        store = InMemoryItemStore([make_item(i) for i in range(1, 6)])

        result = execute(store, _request(page_index=2, page_size=2), uri_composer=composer)

        (spec,) = store.list_calls
        assert spec.skip == 4
        assert spec.take == 2
        assert [dto.id for dto in result.catalog_items] == [5]

    def test_count_is_called_with_filter_only(self, composer):
        store = InMemoryItemStore([make_item(i, brand=2) for i in range(1, 6)])

        execute(
            store,
            _request(page_index=1, page_size=2, catalog_brand_id=2),
            uri_composer=composer,
        )

        (count_spec,) = store.count_calls
        assert count_spec.brand_id == 2
        assert count_spec.type_id is None
        assert not hasattr(count_spec, "skip")

    def test_preserves_store_order(self, composer):
        rows = [make_item(3), make_item(1), make_item(2)]
        store = MagicMock()
        store.count.return_value = 3
        store.list.return_value = rows

        result = execute(store, _request(page_size=10), uri_composer=composer)

        assert [dto.id for dto in result.catalog_items] == [3, 1, 2]


class TestFiltering:
    @pytest.fixture
    def store(self):
        return InMemoryItemStore(
            [
                make_item(1, brand=1, type_=1),
                make_item(2, brand=2, type_=1),
                make_item(3, brand=2, type_=2),
                make_item(4, brand=0, type_=2),
                make_item(5, brand=1, type_=2),
            ]
        )

    def test_brand_filter(self, store, composer):
        result = execute(store, _request(page_size=10, catalog_brand_id=2), uri_composer=composer)

        assert [dto.id for dto in result.catalog_items] == [2, 3]
        assert all(dto.catalog_brand_id == 2 for dto in result.catalog_items)
        assert result.page_count == 1

    def test_type_filter(self, store, composer):
        result = execute(store, _request(page_size=10, catalog_type_id=2), uri_composer=composer)

        assert [dto.id for dto in result.catalog_items] == [3, 4, 5]

    def test_brand_and_type_filters_are_combined(self, store, composer):
        result = execute(
            store,
            _request(page_size=10, catalog_brand_id=1, catalog_type_id=2),
            uri_composer=composer,
        )

        assert [dto.id for dto in result.catalog_items] == [5]

    def test_zero_brand_id_is_a_filter(self, store, composer):
        result = execute(store, _request(page_size=10, catalog_brand_id=0), uri_composer=composer)

        assert [dto.id for dto in result.catalog_items] == [4]

    def test_no_filters_returns_all_rows_paged(self, store, composer):
        result = execute(store, _request(page_size=2, page_index=0), uri_composer=composer)

        assert [dto.id for dto in result.catalog_items] == [1, 2]
        assert result.page_count == 3


class TestPictureUris:
    def test_placeholder_uris_become_absolute(self, composer):
        rows = [
            make_item(1, picture_uri=f"{PLACEHOLDER_BASE_URL}/images/products/1.png"),
            make_item(2, picture_uri="images/products/2.png"),
        ]
        store = InMemoryItemStore(rows)

        result = execute(store, _request(page_size=10), uri_composer=composer)

        assert [dto.picture_uri for dto in result.catalog_items] == [
            f"{CATALOG_BASE_URL}/images/products/1.png",
            f"{CATALOG_BASE_URL}/images/products/2.png",
        ]

    def test_composer_called_once_per_item_in_order(self):
        rows = [make_item(i) for i in (1, 2, 3)]
        store = InMemoryItemStore(rows)
        composer = MagicMock()
        composer.compose_pic_uri.side_effect = lambda uri: f"abs://{uri}"

        result = execute(store, _request(page_size=10), uri_composer=composer)

        assert [c.args[0] for c in composer.compose_pic_uri.call_args_list] == [
            "images/products/1.png",
            "images/products/2.png",
            "images/products/3.png",
        ]
        assert [dto.picture_uri for dto in result.catalog_items] == [
            "abs://images/products/1.png",
            "abs://images/products/2.png",
            "abs://images/products/3.png",
        ]

    def test_uses_injected_mapper(self, composer):
        store = InMemoryItemStore([make_item(1)])
        mapper = MagicMock(side_effect=map_catalog_item_to_out)

        result = execute(store, _request(page_size=10), uri_composer=composer, mapper=mapper)

        mapper.assert_called_once_with(store.rows[0])
        assert result.catalog_items[0].name == "Item 1"


class TestResponse:
    def test_correlation_id_is_echoed(self, composer):
        store = InMemoryItemStore([make_item(1)])

        result = execute(store, _request(correlation_id="abc-123"), uri_composer=composer)

        assert result.correlation_id == "abc-123"

    def test_logs_total_items(self, composer, caplog):
        caplog.set_level(logging.INFO, logger=USECASE_LOGGER)
        store = InMemoryItemStore([make_item(i) for i in range(1, 4)])

        execute(store, _request(page_size=2), uri_composer=composer)

        messages = [r.getMessage() for r in caplog.records if r.name == USECASE_LOGGER]
        assert messages == ["Total items received from database: 3"]


class TestFailures:
    def _error_records(self, caplog):
        return [
            r for r in caplog.records if r.name == USECASE_LOGGER and r.levelno == logging.ERROR
        ]

    def test_store_failure_is_logged_and_reraised(self, composer, caplog):
        caplog.set_level(logging.INFO, logger=USECASE_LOGGER)
        boom = RuntimeError("database is down")
        store = MagicMock()
        store.count.side_effect = boom

        with pytest.raises(RuntimeError) as exc_info:
            execute(store, _request(page_size=2), uri_composer=composer)

        assert exc_info.value is boom
        (record,) = self._error_records(caplog)
        assert record.exc_info[1] is boom
        store.list.assert_not_called()

    def test_fetch_failure_is_logged_and_reraised(self, composer, caplog):
        caplog.set_level(logging.INFO, logger=USECASE_LOGGER)
        boom = ConnectionError("lost connection")
        store = MagicMock()
        store.count.return_value = 4
        store.list.side_effect = boom

        with pytest.raises(ConnectionError) as exc_info:
            execute(store, _request(page_size=2), uri_composer=composer)

        assert exc_info.value is boom
        assert len(self._error_records(caplog)) == 1

    def test_mapper_failure_is_logged_and_reraised(self, composer, caplog):
        caplog.set_level(logging.INFO, logger=USECASE_LOGGER)
        boom = ValueError("bad row")
        store = InMemoryItemStore([make_item(1)])

        with pytest.raises(ValueError) as exc_info:
            execute(
                store,
                _request(page_size=2),
                uri_composer=composer,
                mapper=MagicMock(side_effect=boom),
            )

        assert exc_info.value is boom
        assert len(self._error_records(caplog)) == 1

    def test_composer_failure_is_logged_and_reraised(self, caplog):
        caplog.set_level(logging.INFO, logger=USECASE_LOGGER)
        boom = KeyError("base url")
        store = InMemoryItemStore([make_item(1)])
        composer = MagicMock()
        composer.compose_pic_uri.side_effect = boom

        with pytest.raises(KeyError) as exc_info:
            execute(store, _request(page_size=2), uri_composer=composer)

        assert exc_info.value is boom
        assert len(self._error_records(caplog)) == 1
