import unittest

from app_fixtures import ApiTestCase
from supply_api.models import Product


class SearchSuggestionsApiTest(ApiTestCase):
    def get_suggestions(self, **params):
        return self.client.get("/api/search/suggestions", params=params)

    def test_returns_suggestions_for_valid_query(self):
        response = self.get_suggestions(q="widget")

        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(body["query"], "widget")
        self.assertGreater(len(body["suggestions"]), 0)

    def test_rejects_short_query(self):
        response = self.get_suggestions(q="ab")

        self.assertEqual(response.status_code, 400)
        error = response.json()["error"]
        self.assertEqual(error["code"], "VALIDATION_ERROR")
        self.assertIn("at least 3 characters", error["message"])

    def test_rejects_missing_query(self):
        response = self.get_suggestions()

        self.assertEqual(response.status_code, 400)
        self.assertIn("required", response.json()["error"]["message"])

    def test_rejects_invalid_entity(self):
        response = self.get_suggestions(q="widget", entity="invalid")

        self.assertEqual(response.status_code, 400)
        self.assertIn("Invalid entity type", response.json()["error"]["message"])

    def test_rejects_limit_above_maximum(self):
        response = self.get_suggestions(q="widget", limit=25)

        self.assertEqual(response.status_code, 400)
        self.assertIn("cannot exceed 20", response.json()["error"]["message"])

    def test_rejects_non_numeric_and_zero_limit(self):
        for limit in ("abc", "0", "-3"):
            response = self.get_suggestions(q="widget", limit=limit)
            self.assertEqual(response.status_code, 400, limit)
            self.assertIn("positive number", response.json()["error"]["message"])

    def test_entity_filter_returns_single_type(self):
        for entity, expected_type in (
            ("products", "product"),
            ("suppliers", "supplier"),
            ("orders", "order"),
        ):
            response = self.get_suggestions(q="widget", entity=entity)
            self.assertEqual(response.status_code, 200)
            suggestions = response.json()["suggestions"]
            self.assertGreater(len(suggestions), 0)
            self.assertEqual({item["type"] for item in suggestions}, {expected_type})

    def test_respects_limit(self):
        response = self.get_suggestions(q="widget", limit=2)

        self.assertEqual(response.status_code, 200)
        self.assertLessEqual(len(response.json()["suggestions"]), 2)

    def test_default_limit_is_ten(self):
        with self.session_factory() as db:
            db.add_all(
                [
                    Product(supplier_id=1, name="Widget Extra {}".format(i), price=1.0,
                            sku="WX-{}".format(i), unit="piece")
                    for i in range(12)
                ]
            )
            db.commit()

        response = self.get_suggestions(q="widget", entity="products")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(len(response.json()["suggestions"]), 10)

    def test_matching_is_case_insensitive(self):
        upper = self.get_suggestions(q="WIDGET").json()["suggestions"]
        lower = self.get_suggestions(q="widget").json()["suggestions"]

        self.assertGreater(len(upper), 0)
        self.assertEqual(upper, lower)

    def test_matches_accented_names(self):
        with self.session_factory() as db:
            db.add(Product(product_id=40, supplier_id=1, name="Éclair Widget", price=5.0, sku="ECL-1"))
            db.commit()

        for query in ("Éclair Widget", "éclair", "ÉCLAIR"):
            response = self.get_suggestions(q=query, entity="products")
            self.assertEqual(response.status_code, 200)
            self.assertEqual([item["id"] for item in response.json()["suggestions"]], [40])

    def test_whitespace_query_is_searched_as_is(self):
        response = self.get_suggestions(q="   ")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["query"], "   ")
        self.assertEqual(response.json()["suggestions"], [])

    def test_no_match_returns_empty_list(self):
        response = self.get_suggestions(q="nonexistent")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["suggestions"], [])

    def test_like_wildcards_are_matched_literally(self):
        for query in ("%%%", "___"):
            response = self.get_suggestions(q=query)
            self.assertEqual(response.status_code, 200)
            self.assertEqual(response.json()["suggestions"], [])

    def test_product_suggestion_shape(self):
        products = self.get_suggestions(q="widget", entity="products").json()["suggestions"]

        widget_a = next(item for item in products if item["text"] == "Widget A")
        self.assertEqual(widget_a["type"], "product")
        self.assertEqual(widget_a["id"], 5)
        self.assertIn("WDG-001", widget_a["subtext"])
        self.assertIn("29.99", widget_a["subtext"])
        self.assertEqual(widget_a["metadata"], {"price": 29.99, "sku": "WDG-001"})

    def test_finds_products_by_sku(self):
        products = self.get_suggestions(q="GDG", entity="products").json()["suggestions"]

        self.assertEqual([item["id"] for item in products], [12, 20])
        self.assertTrue(all("GDG" in item["metadata"]["sku"] for item in products))

    def test_supplier_suggestion_shape(self):
        suppliers = self.get_suggestions(q="widget", entity="suppliers").json()["suggestions"]

        supplier = next(item for item in suppliers if item["text"] == "Widget Supplier Inc.")
        self.assertEqual(supplier["id"], 1)
        self.assertEqual(supplier["subtext"], "john@widget.com")
        self.assertNotIn("metadata", supplier)

    def test_orders_ranked_most_recent_first(self):
        orders = self.get_suggestions(q="widget", entity="orders").json()["suggestions"]

        self.assertEqual([item["text"] for item in orders], ["Widget Restock", "Widget Order"])
        self.assertEqual(orders[1]["subtext"], "Status: pending | 2024-01-01")

    def test_unfiltered_results_are_interleaved(self):
        suggestions = self.get_suggestions(q="widget").json()["suggestions"]

        self.assertEqual(
            [(item["type"], item["id"]) for item in suggestions],
            [
                ("product", 5),
                ("supplier", 3),
                ("order", 3),
                ("product", 15),
                ("supplier", 1),
                ("order", 1),
            ],
        )

    def test_unfiltered_limit_splits_across_entities(self):
        suggestions = self.get_suggestions(q="widget", limit=4).json()["suggestions"]

        self.assertEqual(
            [item["type"] for item in suggestions],
            ["product", "supplier", "order", "product"],
        )

    def test_exact_match_ranks_first(self):
        products = self.get_suggestions(q="Widget A", entity="products").json()["suggestions"]

        self.assertEqual(products[0]["text"], "Widget A")

    def test_prefix_match_ranks_before_contains(self):
        products = self.get_suggestions(q="wid", entity="products").json()["suggestions"]

        self.assertEqual([item["text"] for item in products], ["Widget A", "Super Widget"])


if __name__ == "__main__":
    unittest.main()
