from cmsgrid.extensions import db
from .base import BaseModel
from .versioned_mixin import VersionedMixin

class Block(BaseModel, VersionedMixin):
    __tablename__ = "blocks"

    __versioned_fields__ = ("type", "order", "content", "media_url")

    section_id = db.Column(db.String(36), db.ForeignKey("sections.id"), nullable=False)
    type = db.Column(db.String(100), nullable=False)  # text, image, video, button
    order = db.Column(db.Integer, nullable=False, default=0)
    content = db.Column(db.JSON, default=dict) # JSON for text/button data
    media_url = db.Column(db.String(512), nullable=True) # URL for images/videos if applicable

    # Relationship to parent Section
    section = db.relationship("Section", back_populates="blocks")

    __table_args__ = (
        db.Index("idx_block_section_order", "section_id", "order"),
    )
