from pathlib import Path

import pytest

import generate_glossary


def test_generates_site_from_arguments(terms_file: Path, out_dir: Path,
                                       capsys: pytest.CaptureFixture) -> None:
    code = generate_glossary.main([str(terms_file), str(out_dir)])

    assert code == 0
    assert "Glossary generation complete!" in capsys.readouterr().out
    assert (out_dir / "index.html").exists()
    for term in ["meaning", "term", "word", "definition", "glossary", "language", "book"]:
        assert (out_dir / f"{term}.html").exists()


def test_prompts_for_missing_paths(terms_file: Path, out_dir: Path,
                                   monkeypatch: pytest.MonkeyPatch) -> None:
    answers = iter([str(terms_file), str(out_dir)])
    prompts = []

    def fake_input(prompt: str = "") -> str:
        prompts.append(prompt)
        return next(answers)

    monkeypatch.setattr("builtins.input", fake_input)

    assert generate_glossary.main([]) == 0
    assert prompts == ["Enter input file name: ", "Enter output folder name: "]
    assert (out_dir / "book.html").exists()


def test_paths_from_environment(terms_file: Path, out_dir: Path,
                                monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GLOSSARY_INPUT_PATH", str(terms_file))
    monkeypatch.setenv("GLOSSARY_OUTPUT_DIR", str(out_dir))

    assert generate_glossary.main([]) == 0
    assert (out_dir / "index.html").exists()


def test_page_options(terms_file: Path, out_dir: Path) -> None:
    code = generate_glossary.main([
        str(terms_file), str(out_dir),
        "--title", "Words", "--heading", "All Words", "--color", "navy",
    ])

    assert code == 0
    index = (out_dir / "index.html").read_text(encoding="utf-8")
    assert "<title>Words</title>" in index
    assert "<h1>All Words</h1>" in index
    assert '<font color="navy">book</font>' in (out_dir / "book.html").read_text(encoding="utf-8")


def test_missing_input_exits_nonzero(tmp_path: Path, out_dir: Path,
                                     caplog: pytest.LogCaptureFixture) -> None:
    missing = tmp_path / "missing.txt"

    code = generate_glossary.main([str(missing), str(out_dir)])

    assert code == 1
    assert caplog.text.count(str(missing)) == 1
    assert list(out_dir.iterdir()) == []


def test_missing_output_dir_exits_nonzero(terms_file: Path, tmp_path: Path,
                                          caplog: pytest.LogCaptureFixture) -> None:
    missing = tmp_path / "nowhere"

    assert generate_glossary.main([str(terms_file), str(missing)]) == 1
    assert str(missing) in caplog.text
    assert not missing.exists()


def test_create_dir_flag(terms_file: Path, tmp_path: Path) -> None:
    target = tmp_path / "site"

    assert generate_glossary.main([str(terms_file), str(target), "--create-dir"]) == 0
    assert (target / "index.html").exists()


def test_stats_flag(terms_file: Path, out_dir: Path, capsys: pytest.CaptureFixture) -> None:
    assert generate_glossary.main([str(terms_file), str(out_dir), "--stats"]) == 0

    out = capsys.readouterr().out
    assert "Entries committed: 7" in out
    assert "Wrote 8 pages" in out


def test_invalid_boolean_setting_exits_nonzero(terms_file: Path, out_dir: Path,
                                               monkeypatch: pytest.MonkeyPatch,
                                               caplog: pytest.LogCaptureFixture) -> None:
    monkeypatch.setenv("GLOSSARY_SHOW_PROGRESS", "maybe")

    assert generate_glossary.main([str(terms_file), str(out_dir)]) == 1
    assert "Invalid boolean value: 'maybe'" in caplog.text
    assert list(out_dir.iterdir()) == []


def test_missing_env_file_exits_nonzero(terms_file: Path, out_dir: Path, tmp_path: Path,
                                        caplog: pytest.LogCaptureFixture) -> None:
    env_file = tmp_path / "nosuch.env"

    code = generate_glossary.main([str(terms_file), str(out_dir), "--env-file", str(env_file)])

    assert code == 1
    assert str(env_file) in caplog.text
    assert list(out_dir.iterdir()) == []


def test_dotenv_in_working_directory(terms_file: Path, out_dir: Path, tmp_path: Path,
                                     monkeypatch: pytest.MonkeyPatch) -> None:
    (tmp_path / ".env").write_text("GLOSSARY_TITLE=FromDotenv\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)

    assert generate_glossary.main([str(terms_file), str(out_dir)]) == 0
    assert "<title>FromDotenv</title>" in (out_dir / "index.html").read_text(encoding="utf-8")


def test_empty_output_folder_answer_exits_nonzero(terms_file: Path, tmp_path: Path,
                                                  monkeypatch: pytest.MonkeyPatch,
                                                  caplog: pytest.LogCaptureFixture) -> None:
    workdir = tmp_path / "cwd"
    workdir.mkdir()
    monkeypatch.chdir(workdir)
    monkeypatch.setattr("builtins.input", lambda prompt="": "")

    assert generate_glossary.main([str(terms_file)]) == 1
    assert "No output folder name given" in caplog.text
    assert list(workdir.iterdir()) == []
