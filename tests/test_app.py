import io
import struct
import pytest
from PIL import Image

from xmrg.app import create_app


@pytest.fixture
def client(xmrg_file):
    app = create_app(data_dir=str(xmrg_file.parent))
    app.testing = True
    return app.test_client()


def test_root(client):
    resp = client.get("/")
    assert resp.status_code == 200
    assert resp.get_json()["ok"] is True
    assert resp.headers["Access-Control-Allow-Origin"] == "*"


def test_summary(client):
    resp = client.get("/xmrg/summary?file=xmrg0506199516z")
    assert resp.status_code == 200
    body = resp.get_json()
    assert body["columns"] == 2 and body["rows"] == 2
    assert body["origin_x"] == 367
    assert body["valid_cells"] == 3
    assert body["max_mm"] == 12.34
    assert body["valid_time"] == "1995-05-06T16:00:00"


def test_features_csv(client):
    resp = client.get("/xmrg/features?file=xmrg0506199516z")
    assert resp.status_code == 200
    assert resp.headers["Content-Type"].startswith("text/csv")
    lines = resp.get_data(as_text=True).splitlines()
    assert len(lines) == 4
    assert [line.split(",")[2] for line in lines] == ["2.5", "-999", "0", "12.34"]


def test_features_json(client):
    resp = client.get("/xmrg/features?file=xmrg0506199516z&format=json")
    feats = resp.get_json()["features"]
    assert len(feats) == 4
    assert feats[0]["value"] == 2.5


def test_features_bad_format(client):
    assert client.get("/xmrg/features?file=xmrg0506199516z&format=xml").status_code == 400


def test_preview(client):
    resp = client.get("/xmrg/preview?file=xmrg0506199516z")
    assert resp.status_code == 200
    assert resp.headers["Content-Type"] == "image/png"
    assert Image.open(io.BytesIO(resp.data)).size == (2, 2)


def test_missing_file_param(client):
    assert client.get("/xmrg/summary").status_code == 400


def test_path_escape_rejected(client):
    assert client.get("/xmrg/summary?file=../../etc/passwd").status_code == 400


def test_unknown_file(client):
    assert client.get("/xmrg/summary?file=nope").status_code == 404


def test_unsupported_version(client, xmrg_file, make_xmrg):
    (xmrg_file.parent / "newer").write_bytes(make_xmrg([[1, 2]], marker=66))
    resp = client.get("/xmrg/summary?file=newer")
    assert resp.status_code == 422
    assert "build 5.2.2" in resp.get_json()["error"]


def test_truncated_file(client, xmrg_file, make_xmrg):
    (xmrg_file.parent / "short").write_bytes(make_xmrg([[1, 2], [3, 4]], truncate=5))
    resp = client.get("/xmrg/summary?file=short")
    assert resp.status_code == 500
    assert "I/O error" in resp.get_json()["error"]


def test_zero_row_file(client, xmrg_file):
    data = struct.pack(">i4iii", 16, 0, 0, 2, 0, 16, 4)
    (xmrg_file.parent / "zero").write_bytes(data)
    for endpoint in ("summary", "features", "preview"):
        resp = client.get(f"/xmrg/{endpoint}?file=zero")
        assert resp.status_code == 422
        assert "No rows" in resp.get_json()["error"]
