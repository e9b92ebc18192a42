import pytest

from cmsgrid.grid import StatusEvaluator, VersionTagColumn
from cmsgrid.models import VersionedMixin


class _Stages:
    def __init__(self, differ):
        self.differ = differ
        self.calls = []

    def stages_differ_recursive(self, record):
        self.calls.append(record)
        return self.differ


class _Doc(VersionedMixin):
    __tablename__ = "docs"

    def __init__(self, id="doc-1"):
        self.id = id


class _Plain:
    id = "plain-1"


class _Broken:
    def stages_differ_recursive(self, record):
        raise LookupError("related record missing")


def test_plain_record_has_no_flags_whatever_the_service_says():
    stages = _Stages(differ=True)

    assert StatusEvaluator(stages).status_flags(_Plain()) == {}
    assert stages.calls == []


def test_modified_versioned_record():
    flags = StatusEvaluator(_Stages(differ=True)).status_flags(_Doc())

    assert flags == {
        "modified": {
            "text": "Modified",
            "title": "Item has unpublished changes",
        }
    }


def test_unmodified_versioned_record():
    assert StatusEvaluator(_Stages(differ=False)).status_flags(_Doc()) == {}


def test_flags_are_recomputed_per_call():
    stages = _Stages(differ=True)
    evaluator = StatusEvaluator(stages)
    doc = _Doc()

    assert evaluator.status_flags(doc)
    stages.differ = False
    assert evaluator.status_flags(doc) == {}
    assert len(stages.calls) == 2


def test_extra_providers_are_merged_in_order():
    def archived(record):
        return {"archived": {"text": "Archived"}}

    evaluator = StatusEvaluator(_Stages(differ=True), providers=[archived])

    assert evaluator.status_flags(_Doc()) == {"archived": {"text": "Archived"}}


def test_service_errors_propagate():
    component = VersionTagColumn(StatusEvaluator(_Broken()))

    with pytest.raises(LookupError, match="related record missing"):
        component.column_content(None, _Doc(), "Title")


def test_column_content_for_modified_record():
    component = VersionTagColumn(StatusEvaluator(_Stages(differ=True)))

    assert component.column_content(None, _Doc(), "Title") == (
        ' <span class="ss-gridfield-badge badge status-modified"'
        ' title="Item has unpublished changes">Modified</span>'
    )


def test_column_content_is_empty_string_without_flags():
    component = VersionTagColumn(StatusEvaluator(_Stages(differ=False)))

    content = component.column_content(None, _Doc(), "Title")

    assert content == ""
    assert content is not None


def test_explicit_providers_replace_modified_flag():
    stages = _Stages(differ=True)
    evaluator = StatusEvaluator(stages, providers=[])

    assert evaluator.status_flags(_Doc()) == {}
    assert stages.calls == []
