"""Tests for the query engine."""

import pytest

from primevue_mcp.docs import DocumentStore, QueryEngine, ResourceAddress

from conftest import make_doc


@pytest.fixture
def engine(docs_store):
    return QueryEngine(docs_store)


@pytest.fixture
def example_engine(example_store):
    return QueryEngine(example_store)


class TestSearch:
    """Tests for QueryEngine.search."""

    def test_matches_title_content_and_tags(self, engine):
        results = engine.search("sorting")
        ids = {r.id for r in results}

        # content match, content match, tag match
        assert ids == {
            "/primevue/components/datatable",
            "/primevue/forms/inputtext",
            "/primevue/theming/styled-mode",
        }

    def test_is_case_insensitive(self, engine):
        assert [r.id for r in engine.search("DATATABLE")] == [r.id for r in engine.search("datatable")]

    def test_no_false_positives_or_negatives(self, engine, docs_store):
        for query in ("button", "input", "api", "mode", "xyz", "e"):
            term = query.lower()
            expected = {
                d.id for d in docs_store
                if term in d.title.lower()
                or term in d.content.value.lower()
                or any(term in t.lower() for t in d.tags)
            }
            assert {r.id for r in engine.search(query)} == expected

    def test_title_matches_come_first(self, engine):
        results = engine.search("button")
        titles = [r.component for r in results]

        # Both titles contain "button"; store order is by id
        assert titles == ["Button", "SplitButton"]

        results = engine.search("input")
        assert results[0].component == "InputText"
        assert [r.component for r in results[1:]] == ["Button"]

    def test_partition_keeps_store_order(self, engine):
        results = engine.search("e")
        flags = ["e" in r.component.lower() for r in results]

        assert flags == sorted(flags, reverse=True)
        matched = [r.id for r in results if "e" in r.component.lower()]
        unmatched = [r.id for r in results if "e" not in r.component.lower()]
        assert matched == sorted(matched)
        assert unmatched == sorted(unmatched)

    def test_component_prefilter(self, engine):
        results = engine.search("button", component="split")
        assert [r.component for r in results] == ["SplitButton"]

    def test_component_prefilter_is_subset(self, engine):
        everything = {r.id for r in engine.search("e")}
        filtered = engine.search("e", component="BUTTON")

        assert {r.id for r in filtered} <= everything
        assert all("button" in r.component.lower() for r in filtered)

    def test_snippet_keeps_first_three_matching_lines(self):
        content = "\n".join(f"line {i} with token" for i in range(5))
        store = DocumentStore([make_doc("/primevue/components/x", "x", content=content)])

        [entry] = QueryEngine(store).search("TOKEN")

        assert entry.snippet == "line 0 with token\nline 1 with token\nline 2 with token"

    def test_snippet_falls_back_to_title(self, engine):
        results = {r.id: r for r in engine.search("sorting")}
        assert results["/primevue/theming/styled-mode"].snippet == "styled mode documentation"

    def test_entry_fields(self, engine):
        [entry] = engine.search("sortField")

        assert entry.category == "components"
        assert entry.uri == "primevue://components/datatable"
        assert entry.tags == ["components"]

    def test_unknown_category_for_empty_file(self):
        store = DocumentStore([make_doc("/primevue/misc/a", "a", content="hello")])
        [entry] = QueryEngine(store).search("hello")
        assert entry.category == "Unknown"

    def test_placeholder_for_missing_content_is_not_searched(self):
        store = DocumentStore([
            make_doc("/primevue/components/empty", "empty", content=""),
            make_doc("/primevue/components/stub", "stub", content="Not available yet", tags=["available"]),
        ])
        engine = QueryEngine(store)

        assert [r.id for r in engine.search("available")] == ["/primevue/components/stub"]
        assert [r.snippet for r in engine.search("empty")] == ["empty documentation"]

    def test_no_match_is_empty(self, engine):
        assert engine.search("nonexistent-term") == []

    def test_format_search(self, example_engine):
        text = example_engine.format_search("api")

        assert text.startswith('Found 1 results for "api":')
        assert "**button** (components)" in text
        assert "Tags: components" in text
        assert "(URI: primevue://components/button)" in text

    def test_format_search_no_results(self, example_engine):
        assert example_engine.format_search("zzz") == 'Found 0 results for "zzz":\n\n'


class TestGetComponentAPI:
    """Tests for QueryEngine.get_component_api."""

    def test_returns_api_section(self, engine):
        text = engine.get_component_api("datatable")

        assert text.startswith("# DataTable API Reference")
        assert "Category: components" in text
        assert "### API\nprops: value, sortField" in text
        assert "displays data in tabular format" not in text

    def test_title_match_is_case_insensitive(self, engine):
        assert engine.get_component_api("BUTTON").startswith("# Button API Reference")

    def test_whole_content_without_marker(self, engine):
        text = engine.get_component_api("splitbutton")
        assert "SplitButton groups a set of commands" in text

    def test_falls_back_to_id_lookup(self):
        store = DocumentStore([
            make_doc("/primevue/components/tree-select", "Tree Select", content="### API\nprops: nodes",
                     file="components/tree-select.md"),
        ])
        text = QueryEngine(store).get_component_api("Tree-Select")
        assert "# Tree Select API Reference" in text
        assert "props: nodes" in text

    def test_custom_marker(self, docs_store):
        engine = QueryEngine(docs_store, api_marker="events:")
        assert engine.get_component_api("datatable").endswith("events: sort")

    def test_unknown_component_lists_everything(self, engine, docs_store):
        text = engine.get_component_api("slider")

        assert text.startswith('Component "slider" not found.')
        assert "Available components:" in text
        assert "**components**: Button, DataTable, SplitButton" in text
        assert "**forms**: InputText" in text
        assert "**theming**: styled mode" in text
        for doc in docs_store:
            assert text.count(doc.title) >= 1

    def test_unknown_component_groups_sorted(self, engine):
        text = engine.get_component_api("slider")
        lines = [line for line in text.splitlines() if line.startswith("**")]
        assert lines == sorted(lines)


class TestListCategories:
    """Tests for QueryEngine.list_categories."""

    def test_groups_every_category(self, engine, docs_store):
        groups = engine.group_by_category()

        assert list(groups) == ["components", "forms", "theming"]
        assert sum(len(titles) for titles in groups.values()) == len(docs_store)

    def test_output_format(self, engine):
        text = engine.list_categories()

        assert text.startswith("PrimeVue Documentation Categories:\n\n")
        assert "**components** (3 items)\n  - Button\n  - DataTable\n  - SplitButton" in text

    def test_filter_is_case_insensitive(self, engine):
        text = engine.list_categories("FORMS")

        assert text.startswith('Components in "FORMS" category:')
        assert "**forms** (1 items)" in text
        assert "components" not in text

    def test_unknown_category_gives_empty_body(self, engine):
        assert engine.list_categories("charts") == 'Components in "charts" category:\n\n'

    def test_empty_store(self, empty_store):
        assert QueryEngine(empty_store).list_categories() == "PrimeVue Documentation Categories:\n\n"


class TestExampleCorpus:
    """The two-document button/accordion corpus."""

    def test_search_api(self, example_engine):
        [entry] = example_engine.search("api")

        assert entry.id == "/primevue/components/button"
        assert "### API" in entry.snippet
        assert "Accordion" not in entry.snippet

    def test_component_api_hit(self, example_engine):
        text = example_engine.get_component_api("button")

        assert "props: label" in text
        assert "Accordion usage" not in text

    def test_component_api_miss(self, example_engine):
        text = example_engine.get_component_api("slider")
        assert "**components**: accordion, button" in text

    def test_list_categories(self, example_engine):
        groups = example_engine.group_by_category()

        assert groups == {"components": ["accordion", "button"]}
        assert "**components** (2 items)\n  - accordion\n  - button" in example_engine.list_categories()

    def test_custom_namespace(self, example_store):
        engine = QueryEngine(example_store, address=ResourceAddress("ns"))
        [entry] = engine.search("api")
        # ids keep their own prefix when it does not match the namespace
        assert entry.uri == "ns://primevue/components/button"
