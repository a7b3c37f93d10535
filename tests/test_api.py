"""
End-to-end tests for the HTTP boundary
"""

def create_guest(client, **overrides):
    body = {"first_name": "Ana", "last_name": "Lopez"}
    body.update(overrides)
    response = client.post("/guests", json=body)
    assert response.status_code == 201, response.json()
    return response.json()["data"]

def test_health_and_root(client):
    health = client.get("/health").json()
    assert health["status"] == "OK"
    assert health["service"] == "Guest Management API"

    root = client.get("/").json()
    assert "GET /guests" in root["endpoints"]
    assert "DELETE /expenses/:id" in root["endpoints"]

def test_guest_scenario(client):
    """Create, list, confirm and delete a guest through the API"""
    created = create_guest(client, first_name="  Ana ", gender="FEMALE")
    assert created["id"] == 1
    assert created["first_name"] == "Ana"
    assert created["gender"] == "female"
    assert created["confirmation"] is False
    assert created["guest_count"] == 1

    listing = client.get("/guests").json()
    assert listing["success"] is True
    assert [g["id"] for g in listing["data"]] == [1]
    assert listing["data"][0]["confirmation"] is False
    assert listing["meta"] == {"total": 1, "count": 1, "limit": None, "offset": 0}

    updated = client.put("/guests/1", json={"confirmation": True})
    assert updated.status_code == 200
    assert updated.json()["data"]["confirmation"] is True
    assert client.get("/guests/1").json()["data"]["confirmation"] is True

    deleted = client.delete("/guests/1")
    assert deleted.status_code == 200
    assert deleted.json()["data"] == {"id": 1, "deleted": True}

    missing = client.get("/guests/1")
    assert missing.status_code == 404
    assert missing.json() == {"error": "Guest not found", "message": "No guest found with ID 1"}

def test_create_guest_reports_every_error(client):
    response = client.post("/guests", json={"first_name": " ", "expiration_date": "2024-02-30"})
    body = response.json()

    assert response.status_code == 400
    assert body["error"] == "Validation failed"
    assert body["details"] == [
        "first_name is required and must be a non-empty string",
        "last_name is required and must be a non-empty string",
        "expiration_date must be a valid date",
    ]

def test_update_with_no_recognized_field(client):
    create_guest(client)
    response = client.put("/guests/1", json={"nickname": "Anita"})

    assert response.status_code == 400
    assert response.json()["details"] == ["At least one valid field must be provided for update"]

def test_update_and_delete_missing_guest(client):
    update = client.put("/guests/7", json={"first_name": "Ana"})
    delete = client.delete("/guests/7")

    assert update.status_code == 404
    assert delete.status_code == 404
    assert delete.json()["error"] == "Guest not found"

def test_delete_twice_is_not_found(client):
    create_guest(client)

    assert client.delete("/guests/1").status_code == 200
    assert client.delete("/guests/1").status_code == 404

def test_update_null_clears_family(client):
    create_guest(client, family="Lopez")
    response = client.put("/guests/1", json={"family": None})

    assert response.status_code == 200
    assert response.json()["data"]["family"] is None

def test_update_null_on_required_column(client):
    create_guest(client)
    response = client.put("/guests/1", json={"guest_count": None})

    assert response.status_code == 400
    assert response.json()["error"] == "No valid fields provided"

def test_guest_filters_and_pagination(client):
    create_guest(client, first_name="Ana", family="Lopez")
    create_guest(client, first_name="Bruno", family="Diaz", confirmation=True)
    create_guest(client, first_name="Carla", family="Lopez Vega")

    by_family = client.get("/guests", params={"family": "Lopez"}).json()
    assert by_family["meta"]["total"] == 2

    confirmed = client.get("/guests", params={"confirmation": "true"}).json()
    assert [g["first_name"] for g in confirmed["data"]] == ["Bruno"]

    unconfirmed = client.get("/guests", params={"confirmation": "nope"}).json()
    assert unconfirmed["meta"]["total"] == 2

    page = client.get("/guests", params={"limit": 1, "offset": 1}).json()
    assert page["meta"] == {"total": 3, "count": 1, "limit": 1, "offset": 1}

def test_pagination_bounds(client):
    assert client.get("/guests", params={"limit": 0}).status_code == 400
    assert client.get("/guests", params={"limit": 101}).json()["error"] == "Invalid limit parameter"
    assert client.get("/guests", params={"limit": "abc"}).status_code == 400
    assert client.get("/expenses", params={"offset": -1}).json()["error"] == "Invalid offset parameter"
    assert client.get("/guests", params={"limit": 100, "offset": 0}).status_code == 200

def test_invalid_ids(client):
    assert client.get("/guests/0").json()["error"] == "Invalid guest ID"
    assert client.get("/guests/abc").status_code == 400

def test_malformed_body(client):
    response = client.post("/guests", content="not json", headers={"Content-Type": "application/json"})
    assert response.status_code == 400

def test_unknown_route(client):
    response = client.get("/nowhere")

    assert response.status_code == 404
    assert response.json()["error"] == "Route not found"

def test_grupos_crud(client):
    created = client.post("/grupos", json={"nombre": " Ceremonia "})
    assert created.status_code == 201
    assert created.json()["data"] == {"id": 1, "nombre": "Ceremonia"}

    assert client.post("/grupos", json={}).json()["details"] == [
        "nombre is required and must be a non-empty string"
    ]

    client.put("/grupos/1", json={"nombre": "Banquete"})
    listing = client.get("/grupos").json()
    assert listing["data"] == [{"id": 1, "nombre": "Banquete"}]
    assert listing["meta"]["total"] == 1

    assert client.delete("/grupos/1").status_code == 200
    assert client.get("/grupos/1").status_code == 404

def test_conceptos_crud(client):
    created = client.post("/conceptos", json={"nombre": "Alimentos", "subtotal": 250})
    assert created.status_code == 201
    assert created.json()["data"]["subtotal"] == 250.0

    bad = client.post("/conceptos", json={"nombre": "Alimentos", "subtotal": -1})
    assert bad.status_code == 400

    updated = client.put("/conceptos/1", json={"subtotal": 300})
    assert updated.json()["data"]["subtotal"] == 300.0

    assert client.delete("/conceptos/1").status_code == 200
    assert client.delete("/conceptos/1").status_code == 404

def test_expenses_crud_with_label(client):
    client.post("/conceptos", json={"nombre": "Alimentos", "subtotal": 0})

    created = client.post("/expenses", json={"descripcion": "Pastel", "monto": 80, "id_concept": 1})
    assert created.status_code == 201
    assert created.json()["data"]["concepto_descripcion"] == "Alimentos"

    loose = client.post("/expenses", json={"descripcion": "Propinas", "monto": 10}).json()["data"]
    assert loose["concepto_descripcion"] is None

    filtered = client.get("/expenses", params={"id_concept": 1}).json()
    assert [e["descripcion"] for e in filtered["data"]] == ["Pastel"]
    assert filtered["meta"]["total"] == 1

    updated = client.put("/expenses/1", json={"monto": 95.5, "detalle": "tres pisos"})
    assert updated.json()["data"]["monto"] == 95.5
    assert updated.json()["data"]["detalle"] == "tres pisos"

    assert client.post("/expenses", json={"descripcion": "Gratis", "monto": 0}).status_code == 400
    assert client.delete("/expenses/1").status_code == 200

def test_expense_with_unknown_concepto_violates_constraint(client):
    response = client.post("/expenses", json={"descripcion": "Taxi", "monto": 15, "id_concept": 999})

    assert response.status_code == 400
    assert response.json()["error"] == "Database Constraint Error"

def test_deleting_referenced_concepto_is_rejected(client):
    client.post("/conceptos", json={"nombre": "Alimentos", "subtotal": 0})
    client.post("/expenses", json={"descripcion": "Pastel", "monto": 80, "id_concept": 1})

    response = client.delete("/conceptos/1")
    assert response.status_code == 400
    assert "details" not in response.json()

def test_oversized_integers_are_client_errors(client):
    """Numbers past the SQLite INTEGER range are rejected before reaching the store"""
    response = client.post("/expenses", json={"descripcion": "Taxi", "monto": 15, "id_concept": 10**30})
    assert response.status_code == 400
    assert response.json()["details"] == ["id_concept must be a positive integer if provided"]

    response = client.post("/expenses", json={"descripcion": "Taxi", "monto": 10**400})
    assert response.status_code == 400

    response = client.post("/conceptos", json={"nombre": "Alimentos", "subtotal": 10**400})
    assert response.status_code == 400
    assert response.json()["details"] == ["subtotal is required and must be a non-negative number"]

    assert client.get(f"/guests/{10**30}").status_code == 400
    assert client.put(f"/grupos/{2**63}", json={"nombre": "Banquete"}).status_code == 400

    response = client.get("/expenses", params={"id_concept": str(10**30)})
    assert response.status_code == 400
    assert response.json()["error"] == "Invalid id_concept parameter"
