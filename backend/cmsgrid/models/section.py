from cmsgrid.extensions import db
from .base import BaseModel
from .versioned_mixin import VersionedMixin

class Section(BaseModel, VersionedMixin):
    __tablename__ = "sections"

    __versioned_fields__ = ("type", "order", "settings")
    __owns__ = ("blocks",)

    page_id = db.Column(db.String(36), db.ForeignKey("pages.id"), nullable=False)
    type = db.Column(db.String(100), nullable=False)  # hero, features, gallery
    order = db.Column(db.Integer, default=0)
    settings = db.Column(db.JSON, default=dict)

    page = db.relationship("Page", back_populates="sections")
    blocks = db.relationship(
        "Block",
        back_populates="section",
        order_by="Block.order",
        cascade="all, delete-orphan"
    )
