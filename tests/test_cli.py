"""Tests for the run_video_agent command-line runner."""

import json
import sys

import pytest

import run_video_agent

BASE_ARGS = [
    "--theme", "ansiedade em lançamentos",
    "--audience", "criadores que revisam roteiros à noite",
    "--pain", "travar ao ligar a câmera",
    "--action", "comentar a maior trava e compartilhar",
]


def test_text_output(capsys):
    assert run_video_agent.main(BASE_ARGS) == 0
    out = capsys.readouterr().out
    assert "## Roteiro estruturado" in out
    assert "## Estratégia para TikTok" in out


def test_json_output_with_flags(capsys):
    code = run_video_agent.main(BASE_ARGS + ["--platform", "youtube_long", "--duration", "180", "--format", "json"])
    assert code == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["platform"] == "youtube_long"
    assert payload["versions"]["long"]["durationHint"] == "~180s"


def test_defaults_match_product_form(capsys):
    run_video_agent.main(BASE_ARGS + ["--format", "json"])
    payload = json.loads(capsys.readouterr().out)
    assert payload["platform"] == "tiktok"
    assert payload["versions"]["short"]["durationHint"] == "~22s"
    assert "acolhedor e intenso" in payload["platformStrategy"]


def test_brief_file_with_flag_override(tmp_path, capsys):
    brief_file = tmp_path / "brief.json"
    brief_file.write_text(
        json.dumps(
            {
                "theme": "vendas no fim do mês",
                "platform": "kwai",
                "duration": 30,
                "style": "negócios",
                "audience": "lojistas de bairro",
                "corePain": "estoque parado",
                "desiredAction": "salvar o vídeo",
            }
        ),
        encoding="utf-8",
    )
    code = run_video_agent.main(["--brief", str(brief_file), "--pain", "caixa apertado", "--format", "json"])
    assert code == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["platform"] == "kwai"
    assert "caixa apertado" in payload["analysis"]["tension"]
    assert "estoque parado" not in payload["analysis"]["tension"]


@pytest.mark.parametrize(
    "extra",
    [
        ["--duration", "5"],
        ["--theme", "   "],
    ],
)
def test_invalid_brief_exits_with_error(extra, capsys, caplog):
    assert run_video_agent.main(BASE_ARGS + extra) == 1
    assert capsys.readouterr().out == ""
    assert "Invalid brief" in caplog.text


def test_unreadable_brief_file(tmp_path, caplog):
    assert run_video_agent.main(["--brief", str(tmp_path / "missing.json")]) == 1
    assert "Could not read brief" in caplog.text


def test_brief_file_must_hold_an_object(tmp_path, caplog):
    brief_file = tmp_path / "brief.json"
    brief_file.write_text("[1, 2]", encoding="utf-8")
    assert run_video_agent.main(["--brief", str(brief_file)]) == 1
    assert "must contain a JSON object" in caplog.text


def test_logs_go_to_stderr_not_the_output_stream(monkeypatch, capsys):
    seen = {}
    monkeypatch.setattr(run_video_agent.logging, "basicConfig", lambda **kwargs: seen.update(kwargs))
    code = run_video_agent.main(BASE_ARGS + ["--format", "json", "--log-level", "INFO"])
    assert code == 0
    assert [handler.stream for handler in seen["handlers"]] == [sys.stderr]
    json.loads(capsys.readouterr().out)


def test_generation_errors_are_not_reported_as_unreadable_brief(monkeypatch, caplog):
    def broken_run(brief, output_format="text"):
        raise ValueError("registry misconfigured")

    monkeypatch.setattr(run_video_agent, "run", broken_run)
    with pytest.raises(ValueError, match="registry misconfigured"):
        run_video_agent.main(BASE_ARGS)
    assert "Could not read brief" not in caplog.text
