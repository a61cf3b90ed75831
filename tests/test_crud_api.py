import unittest

from app_fixtures import ApiTestCase
from supply_api.models import Supplier


class CrudApiTest(ApiTestCase):
    def test_lists_products_with_camel_case_fields(self):
        response = self.client.get("/api/products")

        self.assertEqual(response.status_code, 200)
        products = response.json()
        self.assertEqual([item["productId"] for item in products], [5, 12, 15, 20])
        self.assertEqual(products[0]["supplierId"], 1)
        self.assertEqual(products[0]["price"], 29.99)

    def test_creates_and_reads_supplier(self):
        response = self.client.post(
            "/api/suppliers",
            json={"name": "Bolt Works", "email": "sales@bolt.example", "contactPerson": "Ann Bolt"},
        )

        self.assertEqual(response.status_code, 201)
        created = response.json()
        self.assertEqual(created["name"], "Bolt Works")
        self.assertEqual(created["contactPerson"], "Ann Bolt")
        self.assertTrue(created["active"])

        fetched = self.client.get("/api/suppliers/{}".format(created["supplierId"]))
        self.assertEqual(fetched.status_code, 200)
        self.assertEqual(fetched.json(), created)

    def test_missing_entity_returns_not_found(self):
        response = self.client.get("/api/branches/404")

        self.assertEqual(response.status_code, 404)
        error = response.json()["error"]
        self.assertEqual(error["code"], "NOT_FOUND")
        self.assertIn("404", error["message"])

    def test_partial_update_keeps_other_fields(self):
        response = self.client.put("/api/suppliers/2", json={"phone": "555-9999"})

        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(body["phone"], "555-9999")
        self.assertEqual(body["name"], "Gadget Corp")

    def test_null_for_required_column_is_a_validation_error(self):
        response = self.client.put("/api/products/5", json={"price": None})

        self.assertEqual(response.status_code, 400)
        error = response.json()["error"]
        self.assertEqual(error["code"], "VALIDATION_ERROR")
        self.assertIn("price cannot be null", error["message"])
        self.assertEqual(self.client.get("/api/products/5").json()["price"], 29.99)

    def test_null_clears_optional_column(self):
        response = self.client.put("/api/suppliers/2", json={"phone": None})

        self.assertEqual(response.status_code, 200)
        self.assertIsNone(response.json().get("phone"))

    def test_update_missing_entity_returns_not_found(self):
        response = self.client.put("/api/suppliers/999", json={"phone": "555-9999"})

        self.assertEqual(response.status_code, 404)

    def test_delete_removes_row(self):
        created = self.client.post("/api/suppliers", json={"name": "Short Lived"}).json()
        before = self.count_rows(Supplier)

        response = self.client.delete("/api/suppliers/{}".format(created["supplierId"]))

        self.assertEqual(response.status_code, 204)
        self.assertEqual(self.count_rows(Supplier), before - 1)
        self.assertEqual(
            self.client.delete("/api/suppliers/{}".format(created["supplierId"])).status_code,
            404,
        )

    def test_invalid_body_is_a_validation_error(self):
        response = self.client.post("/api/products", json={"supplierId": 1, "price": 5.0})

        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()["error"]["code"], "VALIDATION_ERROR")

    def test_deliveries_round_trip_dates(self):
        response = self.client.post(
            "/api/deliveries",
            json={"supplierId": 1, "deliveryDate": "2024-02-01", "name": "February drop"},
        )

        self.assertEqual(response.status_code, 201)
        self.assertEqual(response.json()["deliveryDate"], "2024-02-01")
        self.assertEqual(response.json()["status"], "pending")

    def test_orders_collection_lists_seeded_orders(self):
        response = self.client.get("/api/orders")

        self.assertEqual(response.status_code, 200)
        self.assertEqual([item["name"] for item in response.json()][:3], [
            "Widget Order",
            "Gadget Order",
            "Widget Restock",
        ])

    def test_health(self):
        response = self.client.get("/health")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["status"], "ok")


if __name__ == "__main__":
    unittest.main()
