from cmsgrid.extensions import db
from .base import BaseModel

class Tag(BaseModel):
    """Plain record without stages; listed in grids but never flagged."""
    __tablename__ = "tags"

    name = db.Column(db.String(100), nullable=False, unique=True)
