from contextlib import contextmanager
from sitecanvas.extensions import db


@contextmanager
def transactional(session=None):
    """Context manager for database transactions."""
    if session is None:
        session = db.session
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
