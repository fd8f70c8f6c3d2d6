"""Purchases and sales routers: HTTP surface of the coordinator."""

from decimal import Decimal

import pytest


@pytest.fixture
def product(make_product):
    return make_product(stock=20, name="Widget")


def _stock(client, product_id):
    return client.get(f"/products/{product_id}").json()["stock"]


class TestPurchases:

    def test_create_update_delete(self, client, product):
        response = client.post(
            "/purchases",
            json={"product_id": product.id, "quantity": 3, "price": "10", "supplier_name": "Northwind"},
        )
        assert response.status_code == 201
        purchase = response.json()
        assert Decimal(purchase["total"]) == Decimal("30")
        assert purchase["product_name"] == "Widget"
        assert _stock(client, product.id) == 23

        response = client.put(f"/purchases/{purchase['id']}", json={"quantity": 1})
        assert response.status_code == 200
        assert Decimal(response.json()["total"]) == Decimal("10")
        assert _stock(client, product.id) == 21

        assert client.delete(f"/purchases/{purchase['id']}").status_code == 204
        assert _stock(client, product.id) == 20
        assert client.get(f"/purchases/{purchase['id']}").status_code == 404

    def test_explicit_total(self, client, product):
        response = client.post(
            "/purchases",
            json={"product_id": product.id, "quantity": 3, "price": "10", "total": "25"},
        )

        assert Decimal(response.json()["total"]) == Decimal("25")

    def test_unknown_product(self, client):
        response = client.post("/purchases", json={"product_id": 404, "quantity": 1, "price": "1"})

        assert response.status_code == 404
        assert response.json()["code"] == "NOT_FOUND"
        assert response.json()["success"] is False

    def test_zero_quantity_is_rejected(self, client, product):
        response = client.post("/purchases", json={"product_id": product.id, "quantity": 0, "price": "1"})

        assert response.status_code == 422
        assert _stock(client, product.id) == 20

    def test_oversized_quantity_is_rejected(self, client, product):
        response = client.post(
            "/purchases", json={"product_id": product.id, "quantity": 10**20, "price": "1"}
        )

        assert response.status_code == 422
        assert _stock(client, product.id) == 20
        assert client.get("/purchases").json() == []

    def test_sub_cent_price_is_rejected(self, client, product):
        response = client.post(
            "/purchases", json={"product_id": product.id, "quantity": 3, "price": "0.333"}
        )

        assert response.status_code == 422
        assert _stock(client, product.id) == 20

    def test_oversized_computed_total_is_a_validation_error(self, client, product):
        response = client.post(
            "/purchases",
            json={"product_id": product.id, "quantity": 2_000_000_000, "price": "99.99"},
        )

        assert response.status_code == 400
        assert response.json()["code"] == "VALIDATION_ERROR"
        assert _stock(client, product.id) == 20

    def test_changing_product_is_rejected(self, client, product, make_product):
        other = make_product(stock=0)
        purchase = client.post(
            "/purchases", json={"product_id": product.id, "quantity": 2, "price": "1"}
        ).json()

        response = client.put(f"/purchases/{purchase['id']}", json={"product_id": other.id})

        assert response.status_code == 400
        assert response.json()["code"] == "VALIDATION_ERROR"

    def test_list_search_and_analytics(self, client, product):
        client.post("/purchases", json={"product_id": product.id, "quantity": 2, "price": "5", "supplier_name": "Northwind"})
        client.post("/purchases", json={"product_id": product.id, "quantity": 4, "price": "5", "supplier_name": "Contoso"})
        client.post("/purchases", json={"product_id": product.id, "quantity": 1, "price": "5", "supplier_name": "Northwind"})

        assert len(client.get("/purchases").json()) == 3
        assert len(client.get("/purchases", params={"search": "contoso"}).json()) == 1
        assert len(client.get("/purchases", params={"limit": 2}).json()) == 2

        analytics = client.get("/purchases/analytics").json()
        summary = analytics["summary"]
        assert summary["count"] == 3
        assert Decimal(summary["total_amount"]) == Decimal("35")
        assert summary["total_quantity"] == 7
        assert analytics["top_suppliers"][0]["supplier_name"] == "Contoso"
        assert Decimal(analytics["top_suppliers"][0]["total_expenses"]) == Decimal("20")

    def test_date_range_excludes_future_window(self, client, product):
        client.post("/purchases", json={"product_id": product.id, "quantity": 2, "price": "5"})

        response = client.get("/purchases", params={"start_date": "2999-01-01"})

        assert response.json() == []


class TestSales:

    def test_create_update_delete(self, client, product):
        response = client.post("/sales", json={"product_id": product.id, "quantity": 5, "price": "4"})
        assert response.status_code == 201
        sale = response.json()
        assert sale["bill_no"].startswith("MV")
        assert _stock(client, product.id) == 15

        client.put(f"/sales/{sale['id']}", json={"quantity": 2})
        assert _stock(client, product.id) == 18

        client.delete(f"/sales/{sale['id']}")
        assert _stock(client, product.id) == 20

    def test_insufficient_stock(self, client, product):
        response = client.post("/sales", json={"product_id": product.id, "quantity": 21, "price": "1"})

        assert response.status_code == 409
        assert response.json()["code"] == "INSUFFICIENT_STOCK"
        assert _stock(client, product.id) == 20
        assert client.get("/sales").json() == []

    def test_unknown_seller(self, client, product):
        response = client.post(
            "/sales", json={"product_id": product.id, "quantity": 1, "price": "1", "seller_id": 99}
        )

        assert response.status_code == 404
        assert _stock(client, product.id) == 20

    def test_analytics_top_products(self, client, product, make_product):
        other = make_product(stock=10, name="Gadget")
        client.post("/sales", json={"product_id": product.id, "quantity": 2, "price": "3"})
        client.post("/sales", json={"product_id": other.id, "quantity": 1, "price": "50"})
        client.post("/sales", json={"product_id": product.id, "quantity": 1, "price": "3"})

        analytics = client.get("/sales/analytics").json()

        assert analytics["summary"]["count"] == 3
        assert Decimal(analytics["summary"]["total_amount"]) == Decimal("59")
        assert analytics["summary"]["total_quantity"] == 4
        top = analytics["top_products"]
        assert [p["product_name"] for p in top] == ["Gadget", "Widget"]
        assert top[1]["total_quantity"] == 3

    def test_analytics_when_empty(self, client):
        summary = client.get("/sales/analytics").json()["summary"]

        assert summary["count"] == 0
        assert Decimal(summary["total_amount"]) == 0
        assert Decimal(summary["average_value"]) == 0

    def test_end_to_end_scenario(self, client, make_product):
        product = make_product(stock=0)

        purchase = client.post(
            "/purchases", json={"product_id": product.id, "quantity": 50, "price": "2"}
        ).json()
        assert Decimal(purchase["total"]) == Decimal("100")

        sale = client.post("/sales", json={"product_id": product.id, "quantity": 30, "price": "5"}).json()
        assert Decimal(sale["total"]) == Decimal("150")
        assert _stock(client, product.id) == 20

        client.put(f"/sales/{sale['id']}", json={"quantity": 10})
        assert _stock(client, product.id) == 40

        response = client.delete(f"/purchases/{purchase['id']}")
        assert response.status_code == 409
        assert _stock(client, product.id) == 40
