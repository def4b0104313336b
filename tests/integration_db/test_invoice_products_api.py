import unittest

from _db_helpers import MigratedDBTestCase


class TestInvoiceProductsAPI(MigratedDBTestCase):
    def setUp(self):
        super().setUp()
        self._add_seed_owner()

    def test_v1_default_returns_all_products(self):
        r = self.client.get("/api/invoice/5/products")
        self.assertEqual(r.status_code, 200)

        data = r.json()["data"]
        self.assertIsInstance(data, list)
        self.assertEqual([p["name"] for p in data], ["Product A", "Product B", "Product C"])

    def test_v2_header_returns_first_product_only(self):
        r = self.client.get("/api/invoice/5/products", headers={"X-Api-Version": "2.0"})
        self.assertEqual(r.status_code, 200)

        data = r.json()["data"]
        self.assertIsInstance(data, dict)
        self.assertEqual(data["id"], 6)
        self.assertEqual(data["name"], "Product A")

    def test_v2_query_string(self):
        r = self.client.get("/api/invoice/5/products?api-version=2")
        self.assertEqual(r.status_code, 200)
        self.assertEqual(r.json()["data"]["id"], 6)

    def test_explicit_v1_header(self):
        r = self.client.get("/api/invoice/5/products", headers={"X-Api-Version": "1.0"})
        self.assertEqual(r.status_code, 200)
        self.assertEqual(len(r.json()["data"]), 3)

    def test_unsupported_version_is_400(self):
        r = self.client.get("/api/invoice/5/products", headers={"X-Api-Version": "3.0"})
        self.assertEqual(r.status_code, 400)

    def test_malformed_version_is_400(self):
        r = self.client.get("/api/invoice/5/products", headers={"X-Api-Version": "latest"})
        self.assertEqual(r.status_code, 400)

    def test_conflicting_query_and_header_is_400(self):
        r = self.client.get(
            "/api/invoice/5/products?api-version=1.0",
            headers={"X-Api-Version": "2.0"},
        )
        self.assertEqual(r.status_code, 400)

    def test_products_of_missing_invoice_is_404(self):
        r = self.client.get("/api/invoice/77/products")
        self.assertEqual(r.status_code, 404)

    def test_v2_invoice_without_products_is_404(self):
        inv_id = self._add_invoice(name="empty")
        r = self.client.get(f"/api/invoice/{inv_id}/products", headers={"X-Api-Version": "2.0"})
        self.assertEqual(r.status_code, 404)

    def test_product_by_position(self):
        r = self.client.get("/api/invoice/5/products/1")
        self.assertEqual(r.status_code, 200)
        self.assertEqual(r.json()["data"]["name"], "Product A")

        r = self.client.get("/api/invoice/5/products/3")
        self.assertEqual(r.status_code, 200)
        self.assertEqual(r.json()["data"]["name"], "Product C")

    def test_product_position_out_of_range(self):
        for position in (0, 4, -1):
            r = self.client.get(f"/api/invoice/5/products/{position}")
            self.assertEqual(r.status_code, 404, position)

    def test_product_by_name(self):
        r = self.client.get("/api/invoice/5/products/product b")
        self.assertEqual(r.status_code, 200)

        data = r.json()["data"]
        self.assertEqual(len(data), 1)
        self.assertEqual(data[0]["id"], 7)

    def test_product_by_name_without_match_is_empty(self):
        r = self.client.get("/api/invoice/5/products/Widget")
        self.assertEqual(r.status_code, 200)
        self.assertEqual(r.json()["data"], [])

    def test_position_accepts_ascii_digits_only(self):
        # int() would accept all of these; none is an ASCII position and all are too short for a name
        for key in ("0_1", "\u0663", "+1"):
            r = self.client.get(f"/api/invoice/5/products/{key}")
            self.assertEqual(r.status_code, 404, key)

    def test_products_of_oversized_invoice_id_is_400(self):
        r = self.client.get("/api/invoice/99999999999999999999/products")
        self.assertEqual(r.status_code, 400)

        r = self.client.get("/api/invoice/99999999999999999999/products/1")
        self.assertEqual(r.status_code, 400)

    def test_product_name_segment_length_is_constrained(self):
        r = self.client.get("/api/invoice/5/products/abcd")
        self.assertEqual(r.status_code, 404)

        r = self.client.get("/api/invoice/5/products/abcdefghijk")
        self.assertEqual(r.status_code, 404)


if __name__ == "__main__":
    unittest.main()
