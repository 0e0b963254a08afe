import pytest

from lookup.core import ErrorKind

from client import api
from client import cep as cep_cli
from client import quote as quote_cli
from fakes import FakeProvider, quote


def test_cep_cli_prints_winner(monkeypatch, capsys):
    monkeypatch.setattr(api, "cep_providers", lambda: [
        FakeProvider("BrasilAPI", delay=0.3), FakeProvider("ViaCEP", delay=0.01),
    ])
    assert cep_cli.main(["01001000", "--timeout", "1"]) == 0
    out = capsys.readouterr().out
    assert "API: ViaCEP" in out
    assert "City: São Paulo" in out

def test_cep_cli_failure_exit_code(monkeypatch, capsys):
    monkeypatch.setattr(api, "cep_providers", lambda: [
        FakeProvider("BrasilAPI", failure=ErrorKind.NOT_FOUND),
        FakeProvider("ViaCEP", failure=ErrorKind.NOT_FOUND),
    ])
    assert cep_cli.main(["99999999"]) == 1
    assert "all_providers_failed" in capsys.readouterr().out

def test_cep_cli_usage_error():
    with pytest.raises(SystemExit) as exc:
        cep_cli.main([])
    assert exc.value.code == 2

def test_quote_cli_writes_file(monkeypatch, tmp_path, capsys):
    monkeypatch.setattr(api, "server_quote", lambda base_url=None: FakeProvider("server", record=quote(bid="5.55")))
    path = tmp_path / "cotacao.txt"
    assert quote_cli.main(["--output", str(path)]) == 0
    assert path.read_text(encoding="utf-8") == "Dólar: 5.55"
    assert "5.55" in capsys.readouterr().out

def test_quote_cli_server_timeout(monkeypatch, tmp_path, capsys):
    monkeypatch.setattr(api, "server_quote", lambda base_url=None: FakeProvider("server", delay=1.0))
    path = tmp_path / "cotacao.txt"
    assert quote_cli.main(["--output", str(path), "--timeout", "0.05"]) == 1
    assert not path.exists()
    assert "timeout" in capsys.readouterr().out

def test_cli_providers_are_closed(monkeypatch, tmp_path):
    cep_providers = [FakeProvider("BrasilAPI", delay=0.01), FakeProvider("ViaCEP", delay=0.3)]
    monkeypatch.setattr(api, "cep_providers", lambda: cep_providers)
    assert cep_cli.main(["01001000"]) == 0
    assert all(p.closed for p in cep_providers)

    server = FakeProvider("server", delay=1.0)
    monkeypatch.setattr(api, "server_quote", lambda base_url=None: server)
    assert quote_cli.main(["--output", str(tmp_path / "q.txt"), "--timeout", "0.05"]) == 1
    assert server.closed
