"""explorer module tests."""

from __future__ import annotations

import pytest

from lb_stats.common import FetchError, FilterQuery, SortState, UserInputError
from lb_stats.explorer import (
    NEUTRAL_INDICATOR,
    TableExplorer,
    build_table_view,
    detect_role_columns,
    filter_records,
    sort_records,
)
from lb_stats.ui import MemoryView


def _names(records) -> list[str]:
    return [record["Name"] for record in records]


def _loaded_explorer(fake_client_class, records, surface=None) -> TableExplorer:
    explorer = TableExplorer(fake_client_class({"watched": records}), surface=surface)
    assert explorer.load("watched") is True
    return explorer


# --- column roles ---


def test_detect_role_columns_letterboxd_export() -> None:
    roles = detect_role_columns(["Date", "Name", "Year", "Letterboxd URI"])
    assert roles.link_column == "Letterboxd URI"
    assert roles.title_column == "Name"


def test_detect_role_columns_first_match_wins() -> None:
    roles = detect_role_columns(["Film Title", "Movie Name", "URL", "Link"])
    assert roles.title_column == "Film Title"
    assert roles.link_column == "URL"


def test_detect_role_columns_one_column_can_fill_both_roles() -> None:
    roles = detect_role_columns(["Movie-Link", "Title"])
    assert roles.link_column == "Movie-Link"
    assert roles.title_column == "Movie-Link"


def test_detect_role_columns_without_matches() -> None:
    roles = detect_role_columns(["Date", "Rating", "Tags"])
    assert roles.link_column is None
    assert roles.title_column is None


def test_detect_role_columns_is_case_insensitive() -> None:
    roles = detect_role_columns(["poster url", "FILM"])
    assert roles.link_column == "poster url"
    assert roles.title_column == "FILM"


# --- view model ---


def test_build_table_view_has_one_row_per_record_and_first_record_columns(watched_records) -> None:
    view = build_table_view(watched_records, SortState())

    assert len(view.rows) == 3
    assert [header.name for header in view.headers] == ["Date", "Name", "Year", "Letterboxd URI"]
    assert all(header.indicator == NEUTRAL_INDICATOR for header in view.headers)
    assert not any(header.active for header in view.headers)


def test_build_table_view_sort_indicators() -> None:
    records = [{"Name": "a", "Year": "1"}]

    ascending = build_table_view(records, SortState(column="Name", order="asc"))
    descending = build_table_view(records, SortState(column="Name", order="desc"))

    assert [(h.indicator, h.active) for h in ascending.headers] == [("↑", True), ("↕", False)]
    assert [h.indicator for h in descending.headers] == ["↓", "↕"]


def test_build_table_view_links_title_cell_only_when_uri_present(watched_records) -> None:
    view = build_table_view(watched_records, SortState())

    first_row = view.rows[0]
    assert first_row[1].text == "Aftersun"
    assert first_row[1].href == "https://boxd.it/ynSO"
    assert [cell.href for index, cell in enumerate(first_row) if index != 1] == [None, None, None]

    last_row = view.rows[2]
    assert last_row[1].text == "Past Lives"
    assert last_row[1].href is None


def test_build_table_view_renders_missing_values_as_empty() -> None:
    view = build_table_view([{"A": "1", "B": "2"}, {"A": "3"}], SortState())
    assert [cell.text for cell in view.rows[1]] == ["3", ""]


def test_build_table_view_empty_records() -> None:
    view = build_table_view([], SortState(column="Name"))
    assert view.is_empty
    assert view.headers == ()


def test_build_table_view_is_deterministic(watched_records) -> None:
    state = SortState(column="Year", order="desc")
    assert build_table_view(watched_records, state) == build_table_view(watched_records, state)


# --- filtering ---


def test_filter_records_empty_term_keeps_everything(watched_records) -> None:
    assert filter_records(watched_records, FilterQuery()) == watched_records


def test_filter_records_scoped_to_column(watched_records) -> None:
    scoped = filter_records(watched_records, FilterQuery("BOXD", "Name"))
    unscoped = filter_records(watched_records, FilterQuery("BOXD", ""))

    assert scoped == []
    assert _names(unscoped) == ["Aftersun", "parasite"]


def test_filter_records_any_column_match(watched_records) -> None:
    assert _names(filter_records(watched_records, FilterQuery("2022"))) == ["Aftersun"]
    assert _names(filter_records(watched_records, FilterQuery("PARA", "Name"))) == ["parasite"]


def test_explorer_filter_is_relative_to_full_dataset(fake_client_class, watched_records) -> None:
    explorer = _loaded_explorer(fake_client_class, watched_records)

    assert _names(explorer.filter("aftersun")) == ["Aftersun"]
    assert _names(explorer.filter("past")) == ["Past Lives"]
    assert explorer.filter("") == explorer.current_data
    assert len(explorer.last_view.rows) == 3


def test_explorer_scope_change_refilters_with_current_term(fake_client_class, watched_records) -> None:
    view = MemoryView()
    explorer = _loaded_explorer(fake_client_class, watched_records, surface=view)

    view.type_search("2")
    assert len(view.table.rows) == 3

    view.select_scope("Year")
    assert explorer.query == FilterQuery(search_term="2", scope_column="Year")
    assert len(view.table.rows) == 3

    view.type_search("2019")
    assert [row[1].text for row in view.table.rows] == ["parasite"]


def test_explorer_rejects_unknown_scope_column(fake_client_class, watched_records) -> None:
    explorer = _loaded_explorer(fake_client_class, watched_records)
    with pytest.raises(UserInputError, match="Unknown column"):
        explorer.set_scope_column("Director")


# --- sorting ---


def test_sort_toggles_and_resets_order(fake_client_class, watched_records) -> None:
    explorer = _loaded_explorer(fake_client_class, watched_records)

    assert explorer.sort("Name") == SortState("Name", "asc")
    assert explorer.sort("Name") == SortState("Name", "desc")
    assert explorer.sort("Name") == SortState("Name", "asc")
    assert explorer.sort("Year") == SortState("Year", "asc")


def test_sort_is_case_insensitive_text_order(fake_client_class, watched_records) -> None:
    explorer = _loaded_explorer(fake_client_class, watched_records)

    explorer.sort("Name")
    assert _names(explorer.current_data) == ["Aftersun", "parasite", "Past Lives"]

    explorer.sort("Name")
    assert _names(explorer.current_data) == ["Past Lives", "parasite", "Aftersun"]


def test_sort_compares_numbers_as_text() -> None:
    records = [{"Year": "9"}, {"Year": "100"}, {"Year": "10"}]
    sort_records(records, SortState("Year", "asc"))
    assert [record["Year"] for record in records] == ["10", "100", "9"]


def test_sort_treats_missing_values_as_empty() -> None:
    records = [{"Name": "b"}, {"Other": "x"}, {"Name": "a"}]
    sort_records(records, SortState("Name", "asc"))
    assert [record.get("Name") for record in records] == [None, "a", "b"]


def test_sort_descending_keeps_ties_in_original_order() -> None:
    records = [{"k": "a", "id": "1"}, {"k": "a", "id": "2"}, {"k": "b", "id": "3"}]
    sort_records(records, SortState("k", "desc"))
    assert [record["id"] for record in records] == ["3", "1", "2"]


def test_sort_persists_across_filters(fake_client_class, watched_records) -> None:
    explorer = _loaded_explorer(fake_client_class, watched_records)
    explorer.sort("Name")
    explorer.sort("Name")

    assert _names(explorer.filter("")) == ["Past Lives", "parasite", "Aftersun"]
    explorer.set_scope_column("Name")
    assert _names(explorer.filter("p")) == ["Past Lives", "parasite"]


def test_sort_after_filter_renders_full_dataset(fake_client_class, watched_records) -> None:
    explorer = _loaded_explorer(fake_client_class, watched_records)
    explorer.filter("past")
    assert len(explorer.last_view.rows) == 1

    explorer.sort("Year")
    assert len(explorer.last_view.rows) == 3
    assert explorer.last_view.headers[2].indicator == "↑"


def test_sort_rejects_unknown_column(fake_client_class, watched_records) -> None:
    explorer = _loaded_explorer(fake_client_class, watched_records)
    with pytest.raises(UserInputError):
        explorer.sort("Director")


# --- loading ---


def test_load_populates_columns_and_binds_listeners_once(fake_client_class, watched_records) -> None:
    view = MemoryView()
    client = fake_client_class({"watched": watched_records, "watchlist": watched_records[:1]})
    explorer = TableExplorer(client, surface=view)
    assert view.listener_count == 3

    explorer.load("watched")
    explorer.load("watchlist")
    explorer.load("watched")

    assert view.listener_count == 3
    assert view.filter_options[0] == ("", "All Columns")
    assert [value for value, _ in view.filter_options[1:]] == ["Date", "Name", "Year", "Letterboxd URI"]
    assert len(view.table.rows) == 3


def test_load_replaces_dataset_and_resets_view_state(fake_client_class, watched_records) -> None:
    client = fake_client_class({"watched": watched_records, "ratings": [{"Name": "x", "Rating": "4"}]})
    explorer = TableExplorer(client)
    explorer.load("watched")
    explorer.sort("Name")
    explorer.set_scope_column("Year")
    explorer.filter("2019")

    explorer.load("ratings")

    assert explorer.current_dataset == "ratings"
    assert explorer.current_data == [{"Name": "x", "Rating": "4"}]
    assert explorer.sort_state == SortState()
    assert explorer.query == FilterQuery()


def test_load_empty_dataset_shows_placeholder(fake_client_class) -> None:
    view = MemoryView()
    explorer = TableExplorer(fake_client_class({"comments": []}), surface=view)

    explorer.load("comments")

    assert view.filter_options == [("", "All Columns")]
    assert view.table is not None and view.table.is_empty
    assert "no-data" in view.table_html


def test_load_propagates_fetch_error(fake_client_class, watched_records) -> None:
    client = fake_client_class(
        {"watched": watched_records},
        failures={"reviews": FetchError("HTTP error 500", status=500)},
    )
    explorer = TableExplorer(client)
    explorer.load("watched")

    with pytest.raises(FetchError, match="HTTP error 500"):
        explorer.load("reviews")

    assert explorer.current_dataset == "watched"
    assert len(explorer.current_data) == 3


def test_load_csv_uses_static_file(fake_client_class) -> None:
    client = fake_client_class(csv_files={"export/watched.csv": "Name,Year\nHeat,1995\n"})
    explorer = TableExplorer(client)

    assert explorer.load_csv("export/watched.csv") is True
    assert explorer.current_data == [{"Name": "Heat", "Year": "1995"}]


def test_stale_load_is_discarded() -> None:
    class ReentrantClient:
        def __init__(self) -> None:
            self.explorer: TableExplorer | None = None

        def fetch_dataset(self, dataset_id: str):
            if dataset_id == "watched":
                # a newer load starts and completes while this one is pending
                assert self.explorer is not None
                self.explorer.load("watchlist")
                return [{"Name": "stale"}]
            return [{"Name": "fresh"}]

        def fetch_csv(self, path: str):
            raise AssertionError("not used")

    client = ReentrantClient()
    explorer = TableExplorer(client)
    client.explorer = explorer

    assert explorer.load("watched") is False
    assert explorer.current_dataset == "watchlist"
    assert explorer.current_data == [{"Name": "fresh"}]


def test_loaded_dataset_keeps_identifier_and_columns(fake_client_class, watched_records) -> None:
    explorer = _loaded_explorer(fake_client_class, watched_records)

    assert explorer.dataset.dataset_id == "watched"
    assert len(explorer.dataset) == 3
    assert explorer.dataset.columns == ("Date", "Name", "Year", "Letterboxd URI")
    assert explorer.columns == list(explorer.dataset.columns)
