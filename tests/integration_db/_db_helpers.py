import os
import tempfile
import unittest

from fastapi.testclient import TestClient

from app import app
from db.migrate import run_migrations
from db.session import build_engine, build_sessionmaker, get_db
from models.invoice import Invoice, Product


class MigratedDBTestCase(unittest.TestCase):
    """
    Real sqlite file per test, migrated with Alembic (schema + seed),
    wired into the app through the get_db() override.
    """

    raise_server_exceptions = True

    def setUp(self):
        self._tmp = tempfile.NamedTemporaryFile(delete=False, suffix=".db")
        self._tmp.close()

        self.db_url = f"sqlite:///{self._tmp.name}"
        run_migrations(self.db_url)

        self.engine = build_engine(self.db_url)
        self.SessionLocal = build_sessionmaker(self.engine)

        def override_get_db():
            db = self.SessionLocal()
            try:
                yield db
            finally:
                db.close()

        app.dependency_overrides[get_db] = override_get_db
        self.client = TestClient(app, raise_server_exceptions=self.raise_server_exceptions)

    def tearDown(self):
        self.client.close()
        app.dependency_overrides.clear()
        try:
            self.engine.dispose()
        finally:
            if os.path.exists(self._tmp.name):
                os.unlink(self._tmp.name)

    def _add_invoice(self, **fields) -> int:
        data = {"name": "INV001", "email": "john@example.com", "image_url": "sample.png", "amount": 1000.0}
        data.update(fields)
        with self.SessionLocal() as db:
            inv = Invoice(**data)
            db.add(inv)
            db.commit()
            return inv.id

    def _add_seed_owner(self) -> int:
        """Invoice 5: the owner the seed migration's products point at."""
        return self._add_invoice(id=5, name="Seed owner", amount=0.0)

    def _count_products(self, invoice_id: int) -> int:
        with self.SessionLocal() as db:
            return db.query(Product).filter(Product.invoice_id == invoice_id).count()
