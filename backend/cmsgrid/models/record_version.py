from cmsgrid.extensions import db
from .base import BaseModel

PUBLISHED = "published"
UNPUBLISHED = "unpublished"

class RecordVersion(BaseModel):
    __tablename__ = "record_versions"

    entity_type = db.Column(db.String(50), nullable=False)
    entity_id = db.Column(db.String(36), nullable=False)

    version = db.Column(db.Integer, nullable=False)
    status = db.Column(db.String(20), nullable=False)
    # published | unpublished

    snapshot = db.Column(db.JSON, nullable=True)

    created_by = db.Column(db.String(36), nullable=True)

    __table_args__ = (
        db.UniqueConstraint("entity_type", "entity_id", "version", name="uq_record_version"),
        db.Index("idx_record_version_entity", "entity_type", "entity_id"),
    )
