from lookup import settings
from lookup.core import ErrorKind
from lookup.deps import get_quote_provider, get_quote_writer
from lookup.main import app

from fakes import FakeProvider, FakeWriter, quote


def use_provider(provider):
    app.dependency_overrides[get_quote_provider] = lambda: provider


def test_cotacao_fetches_and_saves(client):
    use_provider(FakeProvider("AwesomeAPI", record=quote(bid="5.4321")))
    r = client.get("/cotacao")
    assert r.status_code == 200, r.text
    assert r.json() == {"pair": "USD-BRL", "bid": "5.4321", "source": "AwesomeAPI"}

    # and it is readable back, newest first
    r2 = client.get("/cotacoes")
    assert r2.status_code == 200
    rows = r2.json()
    assert rows[0]["bid"] == "5.4321"
    assert rows[0]["source"] == "AwesomeAPI"

def test_cotacoes_limit_and_order(client):
    for bid in ("5.01", "5.02", "5.03"):
        use_provider(FakeProvider("AwesomeAPI", record=quote(bid=bid)))
        assert client.get("/cotacao").status_code == 200
    rows = client.get("/cotacoes", params={"limit": 2}).json()
    assert [q["bid"] for q in rows] == ["5.03", "5.02"]
    assert client.get("/cotacoes", params={"pair": "EUR-BRL"}).json() == []

def test_upstream_timeout_is_408(client, monkeypatch):
    monkeypatch.setattr(settings, "FETCH_BUDGET_S", 0.05)
    use_provider(FakeProvider("AwesomeAPI", delay=1.0))
    r = client.get("/cotacao")
    assert r.status_code == 408
    err = r.json()["detail"]
    assert err["kind"] == "timeout"
    assert err["stage"] == "fetch"

def test_upstream_rejection_is_502(client):
    use_provider(FakeProvider("AwesomeAPI", failure=ErrorKind.REMOTE_REJECTED))
    r = client.get("/cotacao")
    assert r.status_code == 502
    assert r.json()["detail"]["source"] == "AwesomeAPI"

def test_persist_failure_is_500_and_not_saved(client):
    writer = FakeWriter(failure=ErrorKind.STORAGE_ERROR)
    use_provider(FakeProvider("AwesomeAPI", record=quote()))
    app.dependency_overrides[get_quote_writer] = lambda: writer
    r = client.get("/cotacao")
    assert r.status_code == 500
    err = r.json()["detail"]
    assert err["stage"] == "persist"
    assert err["kind"] == "storage_error"
    assert writer.calls == 1

def test_slow_persist_is_500(client, monkeypatch):
    monkeypatch.setattr(settings, "PERSIST_BUDGET_S", 0.01)
    use_provider(FakeProvider("AwesomeAPI", record=quote()))
    app.dependency_overrides[get_quote_writer] = lambda: FakeWriter(delay=0.05)
    r = client.get("/cotacao")
    assert r.status_code == 500
    assert r.json()["detail"]["kind"] == "timeout"
    assert client.get("/cotacoes").json() == []

def test_healthz_reports_budgets(client):
    r = client.get("/healthz")
    assert r.status_code == 200
    body = r.json()
    assert body["ok"] is True
    assert set(body["budgets"]) == {"fetch_s", "persist_s", "cep_s"}
