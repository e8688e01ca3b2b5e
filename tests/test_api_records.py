from tests.factories import make_maintenance, make_property, make_tenant


# ---------------------------------------------------------------------------
# Properties
# ---------------------------------------------------------------------------

def test_property_rent_is_base_plus_charges(client):
    response = client.post("/api/properties", json={
        "address": "Rue de la Loi 1",
        "baseRent": 1100,
        "waterCharges": 30,
        "electricityCharges": 45.5,
        "commonCharges": 70,
    })
    assert response.status_code == 201
    body = response.json()
    assert body["rent"] == 1245.5
    assert body["gasCharges"] == 0

    updated = client.put(f"/api/properties/{body['id']}", json={"gasCharges": 20, "waterCharges": 0}).json()
    assert updated["rent"] == 1235.5
    assert updated["baseRent"] == 1100


def test_property_created_with_rent_only(client):
    body = client.post("/api/properties", json={"address": "Rue Haute 5", "rent": 800}).json()
    assert body["baseRent"] == 800
    assert body["rent"] == 800


def test_property_image_upload_and_delete(client, store, blob_store):
    property_id = make_property(store)
    first = client.post(f"/api/properties/{property_id}/image", files={"file": ("front.jpg", b"1", "image/jpeg")})
    first_path = first.json()["imagePath"]
    second = client.post(f"/api/properties/{property_id}/image", files={"file": ("back.jpg", b"2", "image/jpeg")})
    assert blob_store.deleted == [first_path]

    assert client.delete(f"/api/properties/{property_id}").status_code == 204
    assert blob_store.deleted == [first_path, second.json()["imagePath"]]
    assert client.get("/api/properties").json() == []


def test_deleting_property_keeps_tenant_display_name(client, store):
    property_id = make_property(store, address="Rue Haute 5")
    tenant_id = client.post("/api/tenants", json={
        "firstName": "Jean", "lastName": "Dupont", "rent": 900, "propertyId": property_id,
    }).json()["id"]
    client.delete(f"/api/properties/{property_id}")
    assert client.get(f"/api/tenants/{tenant_id}").json()["propertyName"] == "Rue Haute 5"


# ---------------------------------------------------------------------------
# Maintenance
# ---------------------------------------------------------------------------

def test_maintenance_resolves_display_names(client, store):
    property_id = make_property(store, address="Rue Haute 5")
    tenant_id = make_tenant(store, first_name="Lina", last_name="Peeters")
    response = client.post("/api/maintenance", json={
        "propertyId": property_id,
        "tenantId": tenant_id,
        "date": "2024-07-10",
        "description": "Fuite salle de bain",
        "cost": 180,
    })
    assert response.status_code == 201
    body = response.json()
    assert body["propertyName"] == "Rue Haute 5"
    assert body["tenantName"] == "Lina Peeters"
    assert body["deductedFromDeposit"] is False

    updated = client.put(f"/api/maintenance/{body['id']}", json={"tenantId": None, "cost": 200}).json()
    assert updated["tenantId"] is None
    assert updated["tenantName"] is None
    assert updated["cost"] == 200


def test_maintenance_needs_known_property(client):
    response = client.post("/api/maintenance", json={
        "propertyId": "ghost", "date": "2024-07-10", "description": "x", "cost": 1,
    })
    assert response.status_code == 422


def test_maintenance_cost_cannot_be_negative(client, store):
    response = client.post("/api/maintenance", json={
        "propertyId": make_property(store), "date": "2024-07-10", "description": "x", "cost": -1,
    })
    assert response.status_code == 422


def test_maintenance_list_filters_and_delete(client, store):
    property_id = make_property(store)
    tenant_id = make_tenant(store)
    mine = make_maintenance(store, property_id, 10, tenant_id=tenant_id)
    make_maintenance(store, property_id, 20)

    assert len(client.get("/api/maintenance").json()) == 2
    assert [m["id"] for m in client.get("/api/maintenance", params={"tenant_id": tenant_id}).json()] == [mine]
    assert client.delete(f"/api/maintenance/{mine}").status_code == 204
    assert client.get(f"/api/maintenance/{mine}").status_code == 404


# ---------------------------------------------------------------------------
# Reminders
# ---------------------------------------------------------------------------

def _reminder(client, tenant_id):
    return client.post("/api/reminders", json={"tenantId": tenant_id, "dueDate": "2024-08-01", "amount": 950})


def test_reminder_defaults_display_fields_from_tenant(client, store):
    property_id = make_property(store, address="Rue Haute 5")
    tenant_id = client.post("/api/tenants", json={
        "firstName": "Jean", "lastName": "Dupont", "rent": 950, "propertyId": property_id,
    }).json()["id"]
    body = _reminder(client, tenant_id).json()
    assert body["tenant"] == "Jean Dupont"
    assert body["property"] == "Rue Haute 5"
    assert body["status"] == "En attente"


def test_send_reminder_marks_it_sent(client, store, mailer):
    tenant_id = make_tenant(store)
    reminder_id = _reminder(client, tenant_id).json()["id"]

    response = client.post(f"/api/reminders/{reminder_id}/send")
    assert response.status_code == 200
    assert response.json()["status"] == "Envoyé"
    assert mailer.sent == [{
        "to": "jean@example.com", "name": "Jean Dupont", "amount": 950, "due": "2024-08-01", "property": "",
    }]


def test_failed_send_keeps_status(client, store, mailer):
    tenant_id = make_tenant(store)
    reminder_id = _reminder(client, tenant_id).json()["id"]
    mailer.fail_with = "Brevo rejected the request (401)"

    response = client.post(f"/api/reminders/{reminder_id}/send")
    assert response.status_code == 502
    assert "401" in response.json()["detail"]
    assert client.get(f"/api/reminders/{reminder_id}").json()["status"] == "En attente"


def test_reminder_update_and_delete(client, store):
    reminder_id = _reminder(client, make_tenant(store)).json()["id"]
    assert client.put(f"/api/reminders/{reminder_id}", json={"status": "Programmé"}).json()["status"] == "Programmé"
    assert client.put(f"/api/reminders/{reminder_id}", json={"status": "Oublié"}).status_code == 422
    assert client.delete(f"/api/reminders/{reminder_id}").status_code == 204
    assert client.get("/api/reminders").json() == []


# ---------------------------------------------------------------------------
# Documents
# ---------------------------------------------------------------------------

def test_document_upload_rename_delete(client, blob_store):
    response = client.post(
        "/api/documents",
        files={"file": ("bail.pdf", b"x" * 2048, "application/pdf")},
        data={"name": "Bail Dupont"},
    )
    assert response.status_code == 201
    body = response.json()
    assert body["name"] == "Bail Dupont"
    assert body["type"] == "application/pdf"
    assert body["size"] == "2.0 KB"
    assert body["path"] in blob_store.blobs
    assert body["url"].endswith(body["path"])

    renamed = client.put(f"/api/documents/{body['id']}", json={"name": "Bail 2024"}).json()
    assert renamed["name"] == "Bail 2024"

    assert client.delete(f"/api/documents/{body['id']}").status_code == 204
    assert blob_store.deleted == [body["path"]]
    assert client.get("/api/documents").json() == []


def test_document_name_defaults_to_filename(client):
    body = client.post("/api/documents", files={"file": ("etat-des-lieux.pdf", b"x", "application/pdf")}).json()
    assert body["name"] == "etat-des-lieux.pdf"
    assert body["size"] == "1 B"


# ---------------------------------------------------------------------------
# Settings
# ---------------------------------------------------------------------------

def test_owner_info_upsert(client):
    assert client.get("/api/settings/owner").json()["name"] == ""

    saved = client.put("/api/settings/owner", json={
        "name": "Immo SPRL", "address": "Rue Royale 1", "companyNumber": "BE 0123.456.789",
    }).json()
    assert saved["id"] == "owner"
    assert saved["companyNumber"] == "BE 0123.456.789"

    updated = client.put("/api/settings/owner", json={"phone": "+32 2 000 00 00"}).json()
    assert updated["name"] == "Immo SPRL"
    assert updated["phone"] == "+32 2 000 00 00"


def test_owner_info_rejects_null_name(client):
    client.put("/api/settings/owner", json={"name": "Immo SPRL"})
    response = client.put("/api/settings/owner", json={"name": None})
    assert response.status_code == 422
    assert "name" in response.json()["error"]
