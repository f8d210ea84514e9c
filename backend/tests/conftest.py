import os
import tempfile

import pytest

# must be set before app.config is imported by any test module
_tmpdir = tempfile.mkdtemp(prefix="products_test_")
os.environ["DATABASE_URL"] = "sqlite:///" + os.path.join(_tmpdir, "test.db")
os.environ.pop("DB_HOST", None)

from sqlalchemy import delete  # noqa: E402

from app.db import SessionLocal, init_db  # noqa: E402
from app.models.product import Product  # noqa: E402


@pytest.fixture(scope="session", autouse=True)
def _schema():
    init_db()


@pytest.fixture(autouse=True)
def _clean_products():
    db = SessionLocal()
    try:
        db.execute(delete(Product))
        db.commit()
    finally:
        db.close()
    yield
