"""
Tests for the medication endpoints.
"""

MEDICATION = {
    "name": "Ibuprofen",
    "description": "Anti-inflammatory",
    "price": 4.5,
    "quantity": 120,
    "category": "Analgesic",
    "laboratory": "Bayer",
}


def create_medication(client, **overrides):
    return client.post("/api/medicamentos", json={**MEDICATION, **overrides})


def test_create_and_list_medications(client):
    response = create_medication(client)
    assert response.status_code == 201
    data = response.json()
    assert data["price"] == 4.5
    assert data["quantity"] == 120

    response = client.get("/api/medicamentos")
    assert len(response.json()) == 1


def test_zero_values_are_accepted(client):
    response = create_medication(client, price=0, quantity=0)
    assert response.status_code == 201
    assert response.json()["quantity"] == 0


def test_missing_fields(client):
    payload = {key: value for key, value in MEDICATION.items() if key != "laboratory"}
    response = client.post("/api/medicamentos", json=payload)
    assert response.status_code == 400
    assert response.json() == {
        "message": "Name, Description, Price, Quantity, Category and Laboratory are required"
    }


def test_negative_price_is_rejected(client):
    response = create_medication(client, price=-1)
    assert response.status_code == 422


def test_partial_update(client):
    medication_id = create_medication(client).json()["id"]
    response = client.put(f"/api/medicamentos/{medication_id}", json={"quantity": 80})
    assert response.status_code == 200
    data = response.json()
    assert data["quantity"] == 80
    assert data["name"] == "Ibuprofen"


def test_update_cannot_clear_price(client):
    medication_id = create_medication(client).json()["id"]
    response = client.put(f"/api/medicamentos/{medication_id}", json={"price": None})
    assert response.status_code == 400


def test_delete_medication(client):
    medication_id = create_medication(client).json()["id"]
    response = client.delete(f"/api/medicamentos/{medication_id}")
    assert response.status_code == 200
    assert response.json()["name"] == "Ibuprofen"
    assert client.get("/api/medicamentos").json() == []


def test_unknown_medication(client):
    response = client.delete("/api/medicamentos/999")
    assert response.status_code == 404
    assert response.json() == {"message": "Medicamento not found"}
