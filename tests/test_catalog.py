"""Tests for the service catalog endpoints and rules."""

import pytest

from app.domain.catalog.schemas import ServiceCreate, ServiceUpdate
from app.domain.catalog.service import CatalogService
from app.shared.errors import ConflictError, NotFoundError, ValidationError
from tests.conftest import auth_headers, make_booking, make_service

VALID_SERVICE = {
    "name": "Spa Pedicure",
    "description": "Luxurious pedicure with foot massage and exfoliation",
    "duration": 60,
    "price": 35,
    "category": "nails",
}


class TestCatalogService:
    def test_create_and_get(self, db):
        catalog = CatalogService(db)
        created = catalog.create_service(ServiceCreate(**VALID_SERVICE))
        assert catalog.get_service(created.id).name == "Spa Pedicure"
        assert created.available is True

    def test_get_unknown_service(self, db):
        with pytest.raises(NotFoundError):
            CatalogService(db).get_service(42)

    def test_list_filters(self, db):
        make_service(db, name="Men's Haircut", category="hair")
        make_service(db, name="Classic Manicure", category="nails")
        make_service(db, name="Gel Nails", category="nails", available=False)

        catalog = CatalogService(db)
        assert len(catalog.list_services()) == 3
        assert [s.name for s in catalog.list_services(category="nails")] == ["Classic Manicure", "Gel Nails"]
        assert [s.name for s in catalog.list_services(category="nails", available=True)] == ["Classic Manicure"]

    def test_list_unknown_category(self, db):
        with pytest.raises(ValidationError):
            CatalogService(db).list_services(category="tattoo")

    def test_delete_refused_while_bookings_exist(self, db, customer, haircut):
        make_booking(db, customer, haircut, status="cancelled")
        with pytest.raises(ConflictError):
            CatalogService(db).delete_service(haircut.id)

    def test_delete_unbooked_service(self, db, haircut):
        CatalogService(db).delete_service(haircut.id)
        with pytest.raises(NotFoundError):
            CatalogService(db).get_service(haircut.id)


class TestServiceBounds:
    @pytest.mark.parametrize("duration", [4, 481, 0, -30])
    def test_duration_out_of_bounds(self, duration):
        with pytest.raises(ValueError):
            ServiceCreate(**{**VALID_SERVICE, "duration": duration})

    @pytest.mark.parametrize("duration", [5, 480])
    def test_duration_bounds_inclusive(self, duration):
        assert ServiceCreate(**{**VALID_SERVICE, "duration": duration}).duration == duration

    def test_negative_price(self):
        with pytest.raises(ValueError):
            ServiceCreate(**{**VALID_SERVICE, "price": -1})

    def test_free_service_allowed(self):
        assert ServiceCreate(**{**VALID_SERVICE, "price": 0}).price == 0

    def test_unknown_category(self):
        with pytest.raises(ValueError):
            ServiceCreate(**{**VALID_SERVICE, "category": "tattoo"})

    def test_category_normalized(self):
        assert ServiceCreate(**{**VALID_SERVICE, "category": " Massage "}).category == "massage"

    def test_update_name_is_stripped(self):
        assert ServiceUpdate(name="  Gel Nails ").name == "Gel Nails"
        assert ServiceUpdate().name is None

    def test_update_blank_name(self):
        with pytest.raises(ValueError):
            ServiceUpdate(name="   ")


class TestCatalogEndpoints:
    def test_public_listing(self, client, haircut):
        response = client.get("/services")
        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert body["count"] == 1
        assert body["data"][0]["name"] == "Men's Haircut"
        assert body["data"][0]["duration"] == 45

    def test_get_missing_service(self, client):
        response = client.get("/services/999")
        assert response.status_code == 404
        assert response.json() == {"success": False, "message": "Service not found"}

    def test_admin_creates_service(self, client, admin):
        response = client.post("/services", json=VALID_SERVICE, headers=auth_headers(admin))
        assert response.status_code == 201
        assert response.json()["data"]["category"] == "nails"

    def test_customer_cannot_create_service(self, client, customer):
        response = client.post("/services", json=VALID_SERVICE, headers=auth_headers(customer))
        assert response.status_code == 403
        assert response.json()["success"] is False

    def test_out_of_bounds_duration_reports_field(self, client, admin):
        response = client.post(
            "/services", json={**VALID_SERVICE, "duration": 600}, headers=auth_headers(admin)
        )
        assert response.status_code == 400
        body = response.json()
        assert body["success"] is False
        assert [e["field"] for e in body["errors"]] == ["duration"]

    def test_admin_updates_service(self, client, admin, haircut):
        response = client.put(
            f"/services/{haircut.id}",
            json={"price": 30, "available": False},
            headers=auth_headers(admin),
        )
        assert response.status_code == 200
        data = response.json()["data"]
        assert data["price"] == 30
        assert data["available"] is False
        assert data["duration"] == 45

    def test_update_rejects_bad_duration(self, client, admin, haircut):
        response = client.put(
            f"/services/{haircut.id}", json={"duration": 2}, headers=auth_headers(admin)
        )
        assert response.status_code == 400

    def test_update_rejects_blank_name(self, client, db, admin, haircut):
        response = client.put(
            f"/services/{haircut.id}", json={"name": "   "}, headers=auth_headers(admin)
        )
        assert response.status_code == 400
        assert [e["field"] for e in response.json()["errors"]] == ["name"]
        db.refresh(haircut)
        assert haircut.name == "Men's Haircut"

    def test_update_strips_name(self, client, admin, haircut):
        response = client.put(
            f"/services/{haircut.id}", json={"name": "  Skin Fade  "}, headers=auth_headers(admin)
        )
        assert response.json()["data"]["name"] == "Skin Fade"

    def test_admin_deletes_service(self, client, admin, haircut):
        response = client.delete(f"/services/{haircut.id}", headers=auth_headers(admin))
        assert response.status_code == 200
        assert client.get(f"/services/{haircut.id}").status_code == 404
