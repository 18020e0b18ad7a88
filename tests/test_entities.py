from datetime import datetime, timedelta, timezone

import pytest

from legal_catalog.core.enums import DocumentType
from legal_catalog.core.exceptions import ValidationError
from legal_catalog.domains.categories.entities import Category
from legal_catalog.domains.documents.entities import LegalDocument, parse_document_type


def new_document(**overrides):
    fields = dict(
        title_id="Judul",
        title_en="Title",
        content_id="Isi",
        content_en="Content",
        document_type="article",
        category_id=1,
    )
    fields.update(overrides)
    return LegalDocument.create_document(**fields)


@pytest.mark.parametrize("field", ["name_id", "name_en"])
def test_category_requires_both_names(field):
    names = {"name_id": "Hukum", "name_en": "Law", field: "  "}
    with pytest.raises(ValidationError):
        Category.create_category(**names)


def test_category_apply_changes_only_touches_given_fields():
    category = Category.create_category("Hukum", "Law", "Deskripsi", "Description")

    changed = category.apply_changes({"name_en": "New Name", "description_id": None})

    assert changed is True
    assert category.name_id == "Hukum"
    assert category.name_en == "New Name"
    assert category.description_id is None
    assert category.description_en == "Description"


def test_category_empty_changes_report_nothing():
    category = Category.create_category("Hukum", "Law")
    assert category.apply_changes({}) is False


def test_category_rejects_null_name():
    category = Category.create_category("Hukum", "Law")
    with pytest.raises(ValidationError):
        category.apply_changes({"name_id": None})


def test_document_defaults():
    document = new_document()

    assert document.is_published is False
    assert document.tags == []
    assert document.document_type is DocumentType.ARTICLE
    assert document.created_at == document.updated_at


@pytest.mark.parametrize("field", ["title_id", "title_en", "content_id", "content_en"])
def test_document_requires_bilingual_text(field):
    with pytest.raises(ValidationError):
        new_document(**{field: ""})


def test_document_rejects_unknown_type():
    with pytest.raises(ValidationError):
        new_document(document_type="regulation")
    with pytest.raises(ValidationError) as exc_info:
        parse_document_type("memo")
    assert isinstance(exc_info.value.__cause__, ValueError)


def test_document_tags_keep_order_and_duplicates():
    document = new_document(tags=["b", "a", "b"])
    assert document.tags == ["b", "a", "b"]


def test_apply_changes_refreshes_updated_at_strictly():
    document = new_document()
    # Время "из будущего": touch() все равно должен сдвинуть updated_at вперед
    document.updated_at = document.updated_at + timedelta(hours=1)
    before = document.updated_at

    document.apply_changes({})

    assert document.updated_at > before


def test_apply_changes_nulls_and_required_fields():
    document = new_document(summary_id="Ringkasan", file_url="https://example.com")

    document.apply_changes({"summary_id": None, "file_url": None, "document_type": "law"})

    assert document.summary_id is None
    assert document.file_url is None
    assert document.document_type is DocumentType.LAW

    with pytest.raises(ValidationError):
        document.apply_changes({"title_en": None})
    with pytest.raises(ValidationError):
        document.apply_changes({"is_published": None})


def test_aware_dates_are_stored_as_naive_utc():
    jakarta = timezone(timedelta(hours=7))
    document = new_document(publication_date=datetime(2001, 11, 21, 7, 0, tzinfo=jakarta))
    assert document.publication_date == datetime(2001, 11, 21, 0, 0)

    document.apply_changes({"effective_date": datetime(2002, 1, 1, 7, 0, tzinfo=jakarta)})
    assert document.effective_date == datetime(2002, 1, 1, 0, 0)
