def test_fleet_home(client):
    r = client.get("/fleet/")
    assert r.status_code == 200
    body = r.get_json()
    assert body["name"] == "Test Agency"
    assert body["total"] == 4
