from __future__ import annotations

import json
from dataclasses import FrozenInstanceError

import pytest

from pagewords.model import DocumentModel, PageRecord
from pagewords.utils.errors import DocumentFormatError


def test_create_is_empty() -> None:
    model = DocumentModel.create("paper.pdf")
    assert model.source_name == "paper.pdf"
    assert model.pages == ()


def test_add_page_appends_in_call_order() -> None:
    model = DocumentModel.create("paper.pdf")
    model.add_page(1, ["b"])
    model.add_page(0, ["a"])
    model.add_page(1, ["c"])
    assert [p.page_number for p in model.pages] == [1, 0, 1]


def test_add_page_none_words_is_empty() -> None:
    model = DocumentModel.create("paper.pdf")
    page = model.add_page(0, None)
    assert page.words == ()


def test_add_page_copies_words() -> None:
    words = ["a", "b"]
    model = DocumentModel.create("paper.pdf")
    model.add_page(0, words)
    words.append("c")
    assert model.pages[0].words == ("a", "b")


def test_source_name_read_only() -> None:
    model = DocumentModel.create("paper.pdf")
    with pytest.raises(AttributeError):
        model.source_name = "other.pdf"  # type: ignore[misc]


def test_page_record_immutable() -> None:
    page = PageRecord(0, ("a",))
    with pytest.raises(FrozenInstanceError):
        page.page_number = 1  # type: ignore[misc]


def test_pages_view_cannot_mutate_model() -> None:
    model = DocumentModel.create("paper.pdf")
    model.add_page(0, ["a"])
    pages = model.pages
    assert isinstance(pages, tuple)
    assert len(model.pages) == 1


def test_to_dict_shape() -> None:
    model = DocumentModel.create("paper.pdf")
    model.add_page(0, ["alpha", "beta"])
    assert model.to_dict() == {
        "pdf_file_name": "paper.pdf",
        "pages": [{"page_number": 0, "words": ["alpha", "beta"]}],
    }


def test_none_source_name_omitted() -> None:
    model = DocumentModel.create(None)
    assert model.to_dict() == {"pages": []}


def test_json_roundtrip_preserves_order() -> None:
    model = DocumentModel.create("paper.pdf")
    model.add_page(0, ["zeta", "alpha"])
    model.add_page(1, [])
    text = model.to_json(indent=2)
    assert json.loads(text)["pages"][0]["words"] == ["zeta", "alpha"]
    assert DocumentModel.from_json(text) == model


def test_from_dict_missing_words_is_empty() -> None:
    model = DocumentModel.from_dict({"pdf_file_name": "x", "pages": [{"page_number": 3}]})
    assert model.pages == (PageRecord(3, ()),)


def test_from_dict_null_values_are_empty() -> None:
    assert DocumentModel.from_dict({"pages": None}).pages == ()
    model = DocumentModel.from_dict({"pages": [{"page_number": 1, "words": None}]})
    assert model.pages == (PageRecord(1, ()),)


@pytest.mark.parametrize(
    "data",
    [
        [],
        {"pdf_file_name": 5},
        {"pages": {}},
        {"pages": ""},
        {"pages": 0},
        {"pages": [{"page_number": 0, "words": {}}]},
        {"pages": [{"page_number": 0, "words": ""}]},
        {"pages": [{"page_number": "1", "words": []}]},
        {"pages": [{"page_number": True, "words": []}]},
        {"pages": [{"page_number": 0, "words": [1]}]},
        {"pages": ["nope"]},
    ],
)
def test_from_dict_rejects_bad_shapes(data: object) -> None:
    with pytest.raises(DocumentFormatError):
        DocumentModel.from_dict(data)  # type: ignore[arg-type]


def test_from_json_invalid() -> None:
    with pytest.raises(DocumentFormatError):
        DocumentModel.from_json("{not json")
