import pytest
from linefinder.engine import Engine
import linefinder_web.web as webmod
from linefinder_web.web import app as flask_app

LINES = ["the quick fox", "", "a quick brown fox jumps"]


@pytest.fixture
def client(monkeypatch):
    eng = Engine(); eng.build(LINES)
    monkeypatch.setattr(webmod, "_engine", eng)
    yield flask_app.test_client()
    eng.shutdown()


@pytest.mark.e2e
def test_find_api_json(client):
    rv = client.get("/api/find?q=quick%20fox")
    assert rv.status_code == 200
    data = rv.get_json()
    assert data["line_no"] == 0
    assert data["line"] == "the quick fox"
    for key in ("score", "exact"):
        assert key in data


@pytest.mark.e2e
def test_find_api_requires_query(client):
    rv = client.get("/api/find")
    assert rv.status_code == 400
    assert "error" in rv.get_json()


@pytest.mark.e2e
def test_health_and_home(client):
    data = client.get("/health").get_json()
    assert data == {"ok": True, "lines": 2, "source": None}
    html = client.get("/").data.decode("utf-8").lower()
    assert "<form" in html


def test_find_api_without_engine(monkeypatch):
    monkeypatch.setattr(webmod, "_engine", None)
    rv = flask_app.test_client().get("/api/find?q=x")
    assert rv.status_code == 503


def test_find_api_on_blank_document(monkeypatch):
    eng = Engine(); eng.build(["", ""])
    webmod.attach(eng)
    try:
        rv = flask_app.test_client().get("/api/find?q=x")
        assert rv.status_code == 422
    finally:
        webmod.attach(None)  # type: ignore[arg-type]


@pytest.mark.e2e
def test_empty_query_reaches_the_engine(client):
    for q in ("", "..."):
        rv = client.get("/api/find", query_string={"q": q})
        assert rv.status_code == 200
        data = rv.get_json()
        assert data["exact"] is False
        assert -1.0 <= data["score"] <= 1.0


@pytest.mark.e2e
def test_health_reports_loaded_document(tmp_path, monkeypatch):
    doc = tmp_path / "poem.txt"
    doc.write_text("white founts falling\n\nhis head a flag\n", encoding="utf-8")
    eng = Engine(); eng.load(doc)
    monkeypatch.setattr(webmod, "_engine", eng)
    try:
        data = flask_app.test_client().get("/health").get_json()
        assert data == {"ok": True, "lines": 2, "source": str(doc)}
    finally:
        eng.shutdown()
