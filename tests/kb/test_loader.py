"""Tests for knowledge base loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from uxguide.kb import (
    DOMAIN_NAMES,
    STACK_NAMES,
    KnowledgeBase,
    KnowledgeBaseError,
    build_collection,
    load_domain,
    load_reasoning,
    load_stack,
    load_knowledge_base,
    parse_csv,
)


def test_parse_csv_handles_quotes_and_short_records() -> None:
    text = 'a,b,c\n1,"x, y",\n\n"say ""hi""",2\n'

    rows = parse_csv(text)

    assert rows == [
        {"a": "1", "b": "x, y", "c": ""},
        {"a": 'say "hi"', "b": "2", "c": ""},
    ]


def test_parse_csv_keeps_newlines_inside_quoted_fields() -> None:
    rows = parse_csv('name,notes\nrow,"first line\nsecond line"\n')

    assert rows == [{"name": "row", "notes": "first line\nsecond line"}]


@pytest.mark.parametrize("text", ["", "   \n", "only,header\n"])
def test_parse_csv_without_data_rows_is_empty(text: str) -> None:
    assert parse_csv(text) == []


def test_build_collection_aligns_rows_with_ranker() -> None:
    rows = [
        {"Name": "Alpha", "Notes": "first entry"},
        {"Name": "Beta", "Notes": "second entry"},
    ]

    collection = build_collection("demo", rows, ("Name", "Notes"), ("Name",), file="demo.csv")

    assert collection.name == "demo"
    assert collection.file == "demo.csv"
    assert len(collection.ranker) == len(collection.rows) == 2
    assert collection.ranker.score("beta")[0][0] == 1
    rows[0]["Name"] = "Changed"
    assert collection.rows[0]["Name"] == "Alpha"


def test_load_knowledge_base_builds_every_collection(knowledge_base: KnowledgeBase) -> None:
    assert set(knowledge_base.domains) == set(DOMAIN_NAMES)
    assert set(knowledge_base.stacks) == set(STACK_NAMES)
    assert knowledge_base.reasoning

    for collection in list(knowledge_base.domains.values()) + list(knowledge_base.stacks.values()):
        assert collection.rows, f"{collection.name} has no rows"
        assert len(collection.ranker) == len(collection.rows)


def test_packaged_reasoning_rows_have_categories(knowledge_base: KnowledgeBase) -> None:
    assert all(row["UI_Category"].strip() for row in knowledge_base.reasoning)


def test_load_knowledge_base_rejects_missing_directory(tmp_path: Path) -> None:
    with pytest.raises(KnowledgeBaseError):
        load_knowledge_base(tmp_path / "missing")


def test_load_knowledge_base_reports_missing_files(tmp_path: Path) -> None:
    with pytest.raises(KnowledgeBaseError, match="Failed to read"):
        load_knowledge_base(tmp_path)


def test_load_domain_rejects_unknown_domain(tmp_path: Path) -> None:
    with pytest.raises(KnowledgeBaseError, match="Unknown domain"):
        load_domain("nope", tmp_path)


def test_load_stack_and_reasoning_from_directory(tmp_path: Path) -> None:
    (tmp_path / "stacks").mkdir()
    (tmp_path / "stacks" / "vue.csv").write_text(
        "No,Category,Guideline,Description,Do,Don't,Code Good,Code Bad,Severity,Docs URL\n"
        "1,Reactivity,Use computed,Derived state belongs in computed,Use computed(),Watch and copy,,,HIGH,\n",
        encoding="utf-8",
    )
    (tmp_path / "ui-reasoning.csv").write_text(
        "No,UI_Category,Severity\n1,Bakery,LOW\n",
        encoding="utf-8",
    )

    stack = load_stack("vue", tmp_path)
    reasoning = load_reasoning(tmp_path)

    assert stack.name == "vue"
    assert stack.file == "stacks/vue.csv"
    assert stack.rows[0]["Guideline"] == "Use computed"
    assert reasoning[0]["UI_Category"] == "Bakery"


def test_load_stack_rejects_unknown_stack(tmp_path: Path) -> None:
    with pytest.raises(KnowledgeBaseError, match="Unknown stack"):
        load_stack("cobol", tmp_path)
