def test_root(client):
    assert client.get("/").json()["success"] is True


def test_health(client):
    res = client.get("/health")

    assert res.status_code == 200
    assert res.json()["data"] == {"database": "connected"}


def test_unknown_route_uses_envelope(client):
    res = client.get("/does-not-exist")

    assert res.status_code == 404
    assert res.json()["success"] is False
