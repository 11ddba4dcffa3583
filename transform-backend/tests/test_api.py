import pytest

from ostransform import __version__, transform


def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    data = resp.json()
    assert data["status"] == "ok"
    assert data["service"] == "OS Transform API"
    assert data["version"] == __version__
    assert len(data["endpoints"]) == 5


def test_to_gridref_get(client):
    resp = client.get("/api/to-gridref", params={"ea": 337297, "no": 503695})
    assert resp.status_code == 200
    assert resp.json() == {
        "text": "NY 37297 03695",
        "html": "NY&thinsp;37297&thinsp;03695",
        "letters": "NY",
        "eastings": "37297",
        "northings": "03695",
    }


def test_to_gridref_post(client):
    resp = client.post("/api/to-gridref", json={"ea": 651409, "no": 313177})
    assert resp.status_code == 200
    assert resp.json()["text"] == "TG 51409 13177"


def test_to_gridref_out_of_bounds(client):
    resp = client.post("/api/to-gridref", json={"ea": 700000, "no": 313177})
    assert resp.status_code == 400
    assert resp.json() == {"error": "Invalid coordinates or out of bounds"}


def test_from_gridref(client):
    resp = client.post("/api/from-gridref", json={"gridref": "NY 37297 03695"})
    assert resp.status_code == 200
    assert resp.json() == {"ea": 337297, "no": 503695}


def test_from_gridref_keeps_whole_meters_as_integers(client):
    resp = client.get("/api/from-gridref", params={"gridref": "NY 37297 03695"})
    assert resp.status_code == 200
    assert '"ea":337297,' in resp.text
    assert '"no":503695}' in resp.text


def test_from_gridref_numeric_body_is_invalid_gridref(client):
    resp = client.post("/api/from-gridref", json={"gridref": 12345})
    assert resp.status_code == 400
    assert resp.json() == {"error": "Invalid grid reference"}


def test_from_gridref_get_query(client):
    resp = client.get("/api/from-gridref", params={"gridref": "ny 372 036"})
    assert resp.status_code == 200
    assert resp.json() == {"ea": 337200, "no": 503600}


@pytest.mark.parametrize("ref", ["NY 373 0369", "ZZ 12345 12345"])
def test_from_gridref_malformed(client, ref):
    resp = client.post("/api/from-gridref", json={"gridref": ref})
    assert resp.status_code == 400
    assert resp.json() == {"error": "Invalid grid reference"}


def test_to_latlng(client):
    resp = client.get("/api/to-latlng", params={"ea": 337297, "no": 503695, "decimals": 3})
    assert resp.status_code == 200
    data = resp.json()
    assert data["lat"] == pytest.approx(54.43, abs=0.05)
    assert data["lng"] == pytest.approx(-2.97, abs=0.05)
    assert data["lat"] == round(data["lat"], 3)


def test_from_latlng(client):
    resp = client.post("/api/from-latlng", json={"lat": 52.6576, "lng": 1.7164})
    assert resp.status_code == 200
    data = resp.json()
    assert data["ea"] == pytest.approx(651409, abs=300)
    assert data["no"] == pytest.approx(313177, abs=300)


def test_from_latlng_out_of_bounds(client):
    resp = client.post("/api/from-latlng", json={"lat": 61.0, "lng": -2.0})
    assert resp.status_code == 400
    assert resp.json()["error"] == "Invalid coordinates or out of bounds"


def test_gridref_to_latlng(client):
    direct = client.post("/api/to-latlng", json={"ea": 337297, "no": 503695, "decimals": 6}).json()
    resp = client.post("/api/gridref-to-latlng", json={"gridref": "NY 37297 03695", "decimals": 6})
    assert resp.status_code == 200
    assert resp.json() == direct


def test_gridref_to_latlng_outside_extent(client):
    resp = client.post("/api/gridref-to-latlng", json={"gridref": "TE 00000 00000"})
    assert resp.status_code == 400
    assert resp.json() == {"error": "Invalid grid reference or out of bounds"}


@pytest.mark.parametrize(
    "path,payload,message",
    [
        ("/api/to-latlng", {"ea": 1}, "Missing required parameters: ea (easting) and no (northing)"),
        ("/api/to-gridref", {}, "Missing required parameters: ea (easting) and no (northing)"),
        ("/api/from-latlng", {"lat": 54}, "Missing required parameters: lat (latitude) and lng (longitude)"),
        ("/api/from-gridref", {"gridref": ""}, "Missing required parameter: gridref (grid reference)"),
        ("/api/gridref-to-latlng", {}, "Missing required parameter: gridref (grid reference)"),
    ],
)
def test_missing_parameters(client, path, payload, message):
    resp = client.post(path, json=payload)
    assert resp.status_code == 400
    assert resp.json() == {"error": message}


def test_non_json_body_treated_as_empty(client):
    resp = client.post("/api/to-gridref", content=b"not json", headers={"Content-Type": "application/json"})
    assert resp.status_code == 400
    assert resp.json()["error"].startswith("Missing required parameters")


@pytest.mark.parametrize(
    "params",
    [{"ea": "abc", "no": 1}, {"ea": 337297, "no": 503695, "decimals": -1}, {"ea": 337297, "no": 503695, "decimals": 1.5}],
)
def test_invalid_parameters(client, params):
    resp = client.get("/api/to-latlng", params=params)
    assert resp.status_code == 400
    assert resp.json()["error"].startswith("Invalid parameters:")


def test_unexpected_error_is_500(client, monkeypatch):
    def boom(*a, **k):
        raise RuntimeError("boom")

    monkeypatch.setattr(transform, "to_gridref", boom)
    resp = client.get("/api/to-gridref", params={"ea": 1, "no": 1})
    assert resp.status_code == 500
    assert resp.json() == {"error": "boom"}


def test_unknown_route(client):
    resp = client.get("/api/nope")
    assert resp.status_code == 404
    assert resp.json() == {"error": "Not found"}


def test_cors_headers(client):
    resp = client.get("/health", headers={"Origin": "http://example.com"})
    assert resp.headers["access-control-allow-origin"] == "*"

    pre = client.options(
        "/api/to-gridref",
        headers={
            "Origin": "http://example.com",
            "Access-Control-Request-Method": "POST",
            "Access-Control-Request-Headers": "Content-Type",
        },
    )
    assert pre.status_code == 200
    assert "POST" in pre.headers["access-control-allow-methods"]
