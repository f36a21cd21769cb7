# tests/test_manage.py
import pytest

import manage


def test_serve_arguments():
    args = manage.build_parser().parse_args(["serve", "--host", "127.0.0.1", "--port", "8080", "--reload"])
    assert (args.command, args.host, args.port, args.reload) == ("serve", "127.0.0.1", 8080, True)


def test_serve_defaults_come_from_settings():
    args = manage.build_parser().parse_args(["serve"])
    assert args.host == manage.settings.HOST
    assert args.port == manage.settings.PORT
    assert args.reload is False


def test_no_command_prints_help(capsys):
    assert manage.main([]) == 0
    assert "init-db" in capsys.readouterr().out


def test_init_db_dispatch(monkeypatch):
    calls = []
    monkeypatch.setattr(manage, "init_db", lambda: calls.append("init"))

    assert manage.main(["init-db"]) == 0
    assert calls == ["init"]


def test_drop_db_declined(monkeypatch):
    monkeypatch.setattr("builtins.input", lambda _prompt: "n")
    assert manage.main(["drop-db"]) == 1


def test_serve_dispatch(monkeypatch):
    seen = {}
    monkeypatch.setattr(manage, "serve", lambda host, port, reload=False: seen.update(host=host, port=port, reload=reload))

    manage.main(["serve", "--port", "9000"])

    assert seen["port"] == 9000
    assert seen["reload"] is False


def test_unknown_command():
    with pytest.raises(SystemExit):
        manage.main(["migrate"])
