import pytest

from cmsgrid.application.versioning import publish_record, unpublish_record
from cmsgrid.domain.invariants.exceptions import InvariantViolation
from cmsgrid.models import Block, RecordVersion, Tag
from cmsgrid.utils.versioning import live_version, snapshot_record


def test_publish_writes_one_version_per_record(make_page):
    page = make_page(sections=2, blocks=3)

    result = publish_record(page, actor_id="editor-1")

    assert result == {"entity_id": page.id, "version": 1}
    versions = RecordVersion.query.all()
    assert len(versions) == 1 + 2 + 2 * 3
    assert {v.status for v in versions} == {"published"}
    assert {v.created_by for v in versions} == {"editor-1"}


def test_publish_snapshot_lists_owned_ids(make_page):
    page = make_page(sections=2)
    publish_record(page)

    snapshot = live_version(page).snapshot
    assert snapshot["fields"]["title"] == "About"
    assert snapshot["owns"]["sections"] == sorted(s.id for s in page.sections)
    assert snapshot == snapshot_record(page)


def test_versions_increment(make_page, db_session):
    page = make_page()
    publish_record(page)
    page.title = "Changed"
    db_session.commit()

    assert publish_record(page)["version"] == 2


def test_media_block_without_url_cannot_be_published(make_page, db_session):
    page = make_page()
    page.sections[0].blocks.append(Block(type="image", order=2, content={}))
    db_session.commit()

    with pytest.raises(InvariantViolation, match="media_url"):
        publish_record(page)

    assert RecordVersion.query.count() == 0


def test_gapped_section_order_cannot_be_published(make_page, db_session):
    page = make_page(sections=2)
    page.sections[1].order = 5
    db_session.commit()

    with pytest.raises(InvariantViolation, match="Section orders"):
        publish_record(page)


def test_plain_records_cannot_be_published(db_session):
    tag = Tag(name="news")
    db_session.add(tag)
    db_session.commit()

    with pytest.raises(InvariantViolation, match="not versioned"):
        publish_record(tag)


def test_unpublish_removes_live_stage(make_page):
    page = make_page()
    publish_record(page)

    result = unpublish_record(page)

    assert result["version"] == 2
    assert live_version(page) is None
    assert live_version(page.sections[0]) is None


def test_unpublish_requires_live_stage(make_page):
    page = make_page()

    with pytest.raises(InvariantViolation, match="not published"):
        unpublish_record(page)
