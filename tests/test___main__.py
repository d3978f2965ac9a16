import sys

from forg import __version__
from forg.__main__ import main


def test___main__(capsys, monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(sys, "argv", ["forg"])

    for name in ("photo.JPG", "notes.md", "archive.zip", "unknown.xyz"):
        (tmp_path / name).write_text(name)
    (tmp_path / "sub").mkdir()

    assert main([]) == 0

    out = capsys.readouterr().out
    assert "  ✓ photo.JPG -> Images" in out
    assert "Organization Complete!" in out
    assert (tmp_path / "Images" / "photo.JPG").exists()
    assert (tmp_path / "Others" / "unknown.xyz").exists()
    assert (tmp_path / "sub").is_dir()


def test___main___help_and_version(capsys, monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "a.txt").write_text("a")

    assert main(["--help", "--version"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("usage: forg")
    assert "Images: jpg, jpeg, png, gif, bmp + 7 more" in out

    assert main(["--version"]) == 0
    assert capsys.readouterr().out == f"forg v{__version__}\n"

    assert (tmp_path / "a.txt").exists()


def test___main___dry_run_and_verbose(capsys, monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(sys, "argv", ["forg"])
    (tmp_path / "a.txt").write_text("a")
    (tmp_path / ".hidden").write_text("h")

    assert main(["-n", "-v", "--bogus"]) == 0

    captured = capsys.readouterr()
    assert "  → a.txt -> Documents" in captured.out
    assert "SKIPPED: Ignored name" in captured.out
    assert "Skipped: 1 files/directories" in captured.out
    assert "Unknown option: --bogus" in captured.err
    assert (tmp_path / "a.txt").exists()


def test___main___skips_own_executable(capsys, monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(sys, "argv", ["/usr/local/bin/organize.sh"])
    (tmp_path / "organize.sh").write_text("#!/bin/sh")
    (tmp_path / "forg").write_text("binary")
    (tmp_path / "run.sh").write_text("#!/bin/sh")

    assert main([]) == 0

    assert (tmp_path / "organize.sh").exists()
    assert (tmp_path / "forg").exists()
    assert (tmp_path / "Code" / "run.sh").exists()


def test___main___exit_code_on_error(capsys, monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(sys, "argv", ["forg"])
    (tmp_path / "Documents").symlink_to(tmp_path / "nowhere")
    (tmp_path / "a.txt").write_text("a")

    assert main([]) == 1

    captured = capsys.readouterr()
    assert "Error creating directory 'Documents'" in captured.err
    assert "Errors: 1" in captured.out


def test___main___unreadable_cwd(capsys, monkeypatch, tmp_path):
    gone = tmp_path / "gone"
    gone.mkdir()
    monkeypatch.chdir(gone)
    gone.rmdir()

    assert main([]) == 1

    err = capsys.readouterr().err
    assert "Cannot organize directory" in err
    assert err.count("FAILED") == 1


def test___main___malformed_flag_keeps_dry_run(capsys, monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(sys, "argv", ["forg"])
    (tmp_path / "a.txt").write_text("a")

    assert main(["--dry-run", "--recursive=1"]) == 0

    captured = capsys.readouterr()
    assert "  → a.txt -> Documents" in captured.out
    assert "Unknown option: --recursive=1" in captured.err
    assert (tmp_path / "a.txt").exists()
    assert not (tmp_path / "Documents").exists()
