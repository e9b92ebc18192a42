from cmsgrid.extensions import db
from .base import BaseModel
from .versioned_mixin import VersionedMixin

class Page(BaseModel, VersionedMixin):
    __tablename__ = 'pages'

    __versioned_fields__ = ("title", "slug", "seo")
    __owns__ = ("sections",)

    title = db.Column(db.String(200), nullable=False)
    slug = db.Column(db.String(200), nullable=False, unique=True, index=True)
    seo = db.Column(db.JSON(none_as_null=True), default=dict)

    # Relationship to Sections (ordered, cascade deletes)
    sections = db.relationship(
        "Section",
        back_populates="page",
        order_by="Section.order",
        cascade="all, delete-orphan"
    )
