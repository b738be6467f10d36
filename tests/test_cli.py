import pytest

from langtour import cli
from langtour.core import registry
from langtour.core.runner import GREETING, run
from langtour.experiments import run_from_config


def test_no_args_prints_greeting_only(capsys):
    assert cli.main([]) == 0
    assert capsys.readouterr().out == GREETING + "\n"


def test_run_uses_registry_order(capsys):
    ran = run(["recursion", "closures", "recursion"])
    assert ran == ["closures", "recursion"]
    assert capsys.readouterr().out.splitlines() == [GREETING, "11", "12", "13", "101", "5040"]


def test_run_verbose_headers(capsys):
    cli.main(["run", "-v", "recursion"])
    assert capsys.readouterr().out.splitlines() == [GREETING, "== Running recursion ==", "5040"]


def test_run_unknown_demo_exits():
    with pytest.raises(SystemExit) as exc:
        cli.main(["run", "goroutines"])
    assert "Unknown demo: goroutines" in str(exc.value.code)


def test_select_unknown_is_key_error():
    with pytest.raises(KeyError):
        registry.select(["nope"])


def test_duplicate_registration_rejected():
    registry.load_all()
    with pytest.raises(ValueError):
        registry.register("values")(lambda: None)


def test_list(capsys):
    cli.main(["list"])
    out = capsys.readouterr().out.splitlines()
    assert len(out) == len(registry.names())
    assert out[0].startswith("values")


def test_config_selection(tmp_path, capsys):
    cfg = tmp_path / "cfg.yaml"
    cfg.write_text("demos: [recursion, variadic-functions]\nverbose: false\nunused: 1\n", encoding="utf-8")
    assert cli.main(["config", "--config", str(cfg)]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[0] == GREETING
    assert out[1:] == ["[1, 2] Total: 3", "[1, 2, 3] Total: 6", "[1, 2, 3, 4, 5, 6, 7] Total: 28", "5040"]


def test_config_empty_file(tmp_path, capsys):
    cfg = tmp_path / "empty.yaml"
    cfg.write_text("", encoding="utf-8")
    run_from_config.main(["--config", str(cfg)])
    assert capsys.readouterr().out == GREETING + "\n"


def test_config_all_and_single_name():
    assert run_from_config.resolve("all") == registry.names()
    assert run_from_config.resolve("maps") == ["maps"]
    assert run_from_config.resolve(None) == []


def test_config_unknown_demo_exits(tmp_path):
    cfg = tmp_path / "bad.yaml"
    cfg.write_text("demos: [nope]\n", encoding="utf-8")
    with pytest.raises(SystemExit):
        run_from_config.main(["--config", str(cfg)])


def test_run_all_verbose_headers(capsys):
    cli.main(["run", "--all", "-v"])
    out = capsys.readouterr().out.splitlines()
    headers = [line[len("== Running "):-len(" ==")] for line in out if line.startswith("== Running ")]
    assert out[0] == GREETING
    assert headers == registry.names()


def test_run_single_name_string(capsys):
    assert run("closures") == ["closures"]
    assert capsys.readouterr().out.splitlines() == [GREETING, "11", "12", "13", "101"]


def test_greeting_printed_before_unknown_name(capsys):
    with pytest.raises(KeyError):
        run(["nope"])
    assert capsys.readouterr().out == GREETING + "\n"


def test_run_all_with_names_rejected(capsys):
    with pytest.raises(SystemExit) as exc:
        cli.main(["run", "--all", "closures"])
    assert exc.value.code == 2
    assert "--all cannot be combined" in capsys.readouterr().err


def test_config_verbose_must_be_bool(tmp_path, capsys):
    cfg = tmp_path / "quoted.yaml"
    cfg.write_text('demos: [recursion]\nverbose: "false"\n', encoding="utf-8")
    with pytest.raises(SystemExit) as exc:
        run_from_config.main(["--config", str(cfg)])
    assert "verbose must be a YAML boolean" in str(exc.value.code)
    assert capsys.readouterr().out == ""
