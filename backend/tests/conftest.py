import pytest

from cmsgrid import create_app
from cmsgrid.extensions import db as _db
from cmsgrid.models import Block, Page, Section


@pytest.fixture()
def app():
    app = create_app("testing")
    with app.app_context():
        _db.create_all()
        yield app
        _db.session.remove()
        _db.drop_all()


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def db_session(app):
    return _db.session


@pytest.fixture()
def make_page(db_session):
    """
    Builds and commits a page with `sections` sections of `blocks` text blocks.
    """
    def _make(title="About", slug="about", sections=1, blocks=1):
        page = Page(title=title, slug=slug, seo={})
        for s in range(1, sections + 1):
            section = Section(type="content", order=s, settings={})
            for b in range(1, blocks + 1):
                section.blocks.append(
                    Block(type="text", order=b, content={"text": f"block {s}.{b}"})
                )
            page.sections.append(section)
        db_session.add(page)
        db_session.commit()
        return page

    return _make
