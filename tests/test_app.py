import pytest

from material_color.app import create_app, parse_seed


@pytest.fixture()
def client():
    app = create_app()
    app.config["TESTING"] = True
    return app.test_client()


def test_parse_seed_accepts_css_colours():
    assert parse_seed("#6750a4") == 0xFF6750A4
    assert parse_seed("6750a4") == 0xFF6750A4
    assert parse_seed("red") == 0xFFFF0000
    assert parse_seed("rgb(0 0 255)") == 0xFF0000FF
    assert parse_seed(None) == 0xFF6750A4


def test_parse_seed_rejects_garbage():
    with pytest.raises(ValueError):
        parse_seed("definitely not a colour")


def test_scheme_endpoint(client):
    resp = client.get("/scheme", query_string={"seed": "#6750a4"})
    assert resp.status_code == 200
    data = resp.get_json()
    assert data["seed"] == "#6750a4"
    assert data["scheme"].startswith("Scheme: variant=TONAL_SPOT, mode=light")
    assert len(data["colors"]) == 55
    assert all(v.startswith("#") and len(v) == 7 for v in data["colors"].values())


def test_scheme_endpoint_2025_dark(client):
    resp = client.get(
        "/scheme",
        query_string={"seed": "teal", "variant": "expressive", "dark": "1", "spec": "2025"},
    )
    assert resp.status_code == 200
    data = resp.get_json()
    assert "mode=dark" in data["scheme"]
    assert "primary_dim" in data["colors"]


@pytest.mark.parametrize(
    "params",
    [
        {"seed": "nope-nope"},
        {"variant": "sparkly"},
        {"contrast": "2"},
        {"contrast": "high"},
        {"spec": "2030"},
        {"platform": "tv"},
    ],
)
def test_scheme_endpoint_rejects_bad_input(client, params):
    resp = client.get("/scheme", query_string=params)
    assert resp.status_code == 400
    assert "error" in resp.get_json()


def test_palette_endpoint(client):
    resp = client.get("/palette", query_string={"seed": "#6750a4", "tones": "0,50,100"})
    assert resp.status_code == 200
    data = resp.get_json()
    assert set(data) == {"primary", "secondary", "tertiary", "neutral", "neutral_variant", "error"}
    assert data["primary"]["0"] == "#000000"
    assert data["primary"]["100"] == "#ffffff"
    assert set(data["error"]) == {"0", "50", "100"}


def test_palette_endpoint_rejects_bad_tones(client):
    assert client.get("/palette", query_string={"tones": "0,abc"}).status_code == 400
    assert client.get("/palette", query_string={"tones": "0,150"}).status_code == 400


def test_quantize_endpoint(client):
    pixels = [0xFFFF0000] * 10 + [0xFF0000FF] * 5
    resp = client.post("/quantize", json={"pixels": pixels, "max_colors": 8})
    assert resp.status_code == 200
    data = resp.get_json()
    assert data["colors"][0] == "#ff0000"
    assert data["population"] == {"#ff0000": 10, "#0000ff": 5}


@pytest.mark.parametrize(
    "body",
    [
        None,
        {"pixels": "red"},
        {"pixels": [-1]},
        {"pixels": [0xFFFF0000], "max_colors": 0},
        {"pixels": [0xFFFF0000], "desired": 0},
    ],
)
def test_quantize_endpoint_rejects_bad_input(client, body):
    resp = client.post("/quantize", json=body)
    assert resp.status_code == 400


def test_source_color_endpoint(client):
    resp = client.post("/source-color", data=bytes([0, 0, 255, 255]) * 20)
    assert resp.status_code == 200
    assert resp.get_json() == {"seed": "#0000ff"}
    assert client.post("/source-color", data=b"").status_code == 400
