from contextlib import contextmanager
from flask import current_app
from cmsgrid.extensions import db

@contextmanager
def transactional():
    """
    Commit on success. On any error roll back, log, and re-raise
    so the caller (or the error handlers) decide the response.
    """
    try:
        yield db.session
        db.session.commit()
    except Exception as exc:
        db.session.rollback()
        current_app.logger.warning("Transaction rolled back: %s: %s", type(exc).__name__, exc)
        raise
