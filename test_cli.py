"""CLI wiring with the generator swapped for a fake."""

from unittest import mock

import pytest

from script_automation import cli
from script_automation.domain.models import FailureKind, GenerationFailure, ScriptText


@pytest.fixture
def run_cli(fake_generator_cls, fake_clipboard, fake_scheduler):
    def run(argv, result=None):
        generator = fake_generator_cls(result or ScriptText("Olá, pessoal!\n\nHoje vamos falar de café."))
        adapters = {
            "script_generator": generator,
            "clipboard": fake_clipboard,
            "scheduler": fake_scheduler,
        }
        with mock.patch.object(cli, "default_adapters", return_value=adapters):
            cli.main(argv)
        return generator

    return run


def test_prints_script(run_cli, capsys):
    generator = run_cli(["--topic", "Café", "--style", "educacional", "--duration", "medio"])
    out = capsys.readouterr().out
    assert "Hoje vamos falar de café." in out
    assert len(generator.calls) == 1
    assert "Tópico: Café" in generator.calls[0]


def test_writes_output_file(run_cli, tmp_path):
    target = tmp_path / "roteiro.txt"
    run_cli(["--topic", "Café", "--output", str(target)])
    assert target.read_text(encoding="utf-8") == "Olá, pessoal!\n\nHoje vamos falar de café.\n"


def test_copy_flag(run_cli, fake_clipboard, capsys):
    run_cli(["--topic", "Café", "--copy"])
    assert fake_clipboard.copied == ["Olá, pessoal!\n\nHoje vamos falar de café."]
    assert "Copied to clipboard" in capsys.readouterr().out


def test_blank_topic_exits_with_message(run_cli, capsys):
    with pytest.raises(SystemExit) as excinfo:
        run_cli(["--topic", "   "])
    assert excinfo.value.code == 1
    assert "Por favor, insira um tópico" in capsys.readouterr().out


def test_generation_failure_exits_with_generic_message(run_cli, capsys):
    with pytest.raises(SystemExit) as excinfo:
        run_cli(["--topic", "Café"], GenerationFailure(FailureKind.CONFIGURATION, "GEMINI_API_KEY is not set"))
    assert excinfo.value.code == 1
    out = capsys.readouterr().out
    assert "Falha ao gerar o roteiro" in out
    assert "GEMINI_API_KEY" not in out


@pytest.mark.parametrize("value,expected", [("VERBOSE", "INFO"), ("debug", "DEBUG"), ("", "INFO")])
def test_log_level_falls_back_to_info(monkeypatch, value, expected):
    import importlib

    from script_automation import config

    monkeypatch.setenv("LOG_LEVEL", value)
    try:
        assert importlib.reload(config).LOG_LEVEL == expected
    finally:
        monkeypatch.delenv("LOG_LEVEL")
        importlib.reload(config)
