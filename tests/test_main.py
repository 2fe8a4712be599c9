from pathlib import Path

from panostitch.main import main

def test_rejected_args_exit_1():
    assert main(["--output=out.jpg"]) == 1

def test_help_and_version_exit_0(capsys):
    assert main(["--help"]) == 0
    assert "Usage:" in capsys.readouterr().out
    assert main(["--version"]) == 0
    assert "Xpano v1.3" in capsys.readouterr().out

def test_launcher_receives_args():
    seen = []

    def launch(args):
        seen.append(args)
        return 7

    assert main(["--gui", "b.jpg", "a.jpg"], launch=launch) == 7
    assert seen[0].run_gui
    assert seen[0].input_paths == (Path("a.jpg"), Path("b.jpg"))

def test_dry_run_reports_resolved_options(capsys):
    assert main(["--output=pano.jpg", "a.jpg"]) == 0
    out = capsys.readouterr().out
    assert "Mode: batch" in out
    assert "projection: spherical" in out
    assert "input_paths: 1 file(s)" in out
    assert "output_format: JPEG" in out

def test_dry_run_without_output_is_gui_mode(capsys):
    assert main(["a.tif"]) == 0
    out = capsys.readouterr().out
    assert "Mode: gui" in out
    assert "output_format" not in out
