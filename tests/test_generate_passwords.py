import json
import re

import pytest

import generate_passwords
import logger
from password_generator import ComplexityLevel, DIGITS, SPECIAL_CHARS


def password_lines(output):
    return re.findall(r"^   (\d+)\. (.*)$", output, flags=re.MULTILINE)


def test_missing_command_is_a_usage_error(capsys):
    with pytest.raises(SystemExit) as exc:
        generate_passwords.main([])
    captured = capsys.readouterr()

    assert exc.value.code == 2
    assert "usage:" in captured.err
    assert captured.out == ""


def test_output_is_numbered_from_one(capsys):
    code = generate_passwords.main(["generate", "-w", "hello,world", "-n", "3", "-u", "--seed", "1"])
    out = capsys.readouterr().out

    assert code == 0
    assert out.startswith("\n> Generated passwords:\n")
    assert out.endswith("\n\n")
    assert [n for n, _ in password_lines(out)] == ["1", "2", "3"]


def test_alias_and_cli_defaults(capsys):
    # -c defaults to basic and -u is off, so only length uses its default
    generate_passwords.main(["g", "-w", "hello,world", "--seed", "3"])
    lines = password_lines(capsys.readouterr().out)

    assert len(lines) == 1
    password = lines[0][1]
    assert len(password) == 12
    assert all(ch in DIGITS for ch in password[::4])


def test_cli_always_passes_complexity_and_whole_words(monkeypatch, capsys):
    seen = {}

    def fake_generate(self, count, complexity=None, use_whole_words=None, length=None, rng=None):
        seen.update(count=count, complexity=complexity, use_whole_words=use_whole_words, length=length)
        return []

    monkeypatch.setattr(generate_passwords.Penguin, "generate_password", fake_generate)
    generate_passwords.main(["generate", "-w", "a"])

    assert seen == {
        "count": 1,
        "complexity": ComplexityLevel.BASIC,
        "use_whole_words": False,
        "length": None,
    }


def test_unknown_complexity_falls_back_to_basic(capsys):
    generate_passwords.main(["generate", "-w", "hello", "-c", "EXTREME", "-l", "8", "--seed", "5"])
    password = password_lines(capsys.readouterr().out)[0][1]

    assert len(password) == 8
    assert not any(ch in SPECIAL_CHARS for ch in password)


def test_penguin_complexity_is_case_insensitive(capsys):
    generate_passwords.main(["generate", "-w", "ignored", "-c", "PeNgUiN", "-l", "10"])
    password = password_lines(capsys.readouterr().out)[0][1]
    assert len(password) == 64


def test_repeated_and_comma_separated_words(capsys):
    generate_passwords.main(["generate", "-w", "hello", "-w", "world", "-u", "-l", "12", "-n", "5"])
    for _, password in password_lines(capsys.readouterr().out):
        assert re.fullmatch(r"(hello\dworld\d|world\dhello\d)", password)


def test_trailing_comma_adds_an_empty_word(capsys):
    # "hello," is two words, the second one empty, so it still gets a separator
    generate_passwords.main(["generate", "-w", "hello,", "-w", "world", "-u", "-l", "13", "-n", "5"])
    for _, password in password_lines(capsys.readouterr().out):
        assert re.fullmatch(r"(?:(?:hello|world|)\d){3}", password)
        assert "hello" in password and "world" in password


def test_no_words_prints_empty_passwords(capsys):
    generate_passwords.main(["generate", "-n", "2"])
    lines = password_lines(capsys.readouterr().out)
    assert [n for n, _ in lines] == ["1", "2"]
    assert all(p.strip() == "" for _, p in lines)


def test_seed_is_reproducible_and_warns(capsys):
    argv = ["generate", "-w", "secure,password", "-c", "hard", "-l", "16", "-n", "3", "--seed", "42"]
    generate_passwords.main(argv)
    first = capsys.readouterr()
    generate_passwords.main(argv)
    second = capsys.readouterr()

    assert first.out == second.out
    assert "reproducible" in first.err


def test_negative_number_is_rejected(capsys):
    with pytest.raises(SystemExit) as exc:
        generate_passwords.main(["generate", "-w", "a", "-n", "-1"])
    assert exc.value.code == 2


def test_hash_output(capsys):
    generate_passwords.main(["generate", "-w", "hello,world", "--hash", "sha256", "-n", "2"])
    for _, line in password_lines(capsys.readouterr().out):
        assert re.fullmatch(r".{12}  \[sha256\] [0-9a-f]{32}\$[0-9a-f]{64}", line)


def test_missing_pepper_reports_error(monkeypatch, capsys):
    monkeypatch.delenv("PENGUIN_PEPPER", raising=False)
    code = generate_passwords.main(["generate", "-w", "a", "--hash", "sha256", "--pepper"])
    captured = capsys.readouterr()

    assert code == 1
    assert captured.err.startswith("[!] Error:")
    assert "Generated passwords" not in captured.out


def test_log_flag_writes_run_without_secrets(tmp_path, monkeypatch, capsys):
    path = tmp_path / "generations.log"
    monkeypatch.setattr(logger, "LOG_PATH", str(path))

    generate_passwords.main(["generate", "-w", "hello,world", "-c", "medium", "-u", "-n", "2", "--log"])
    out = capsys.readouterr().out
    entry = json.loads(path.read_text(encoding="utf-8"))

    assert entry["complexity"] == "medium"
    assert entry["use_whole_words"] is True
    assert entry["length"] == 12
    assert entry["count"] == 2
    assert entry["word_count"] == 2
    raw = path.read_text(encoding="utf-8")
    assert "hello" not in raw
    for _, password in password_lines(out):
        assert password not in raw


def test_split_words():
    assert generate_passwords.split_words(["a,b", "c", ",d,,"]) == ["a", "b", "c", "", "d", "", ""]
    assert generate_passwords.split_words(["hello,"]) == ["hello", ""]
    assert generate_passwords.split_words([]) == []
