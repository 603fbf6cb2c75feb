"""Tests for the command-line entry point."""
import os

import pytest

from launch_sim import cli


def test_parse_args_defaults():
    args = cli.parse_args([])
    assert args.rocket == "Falcon Heavy"
    assert args.target == "Earth Orbit"
    assert args.output_dir == "plots"
    assert args.fast_forward is None
    assert not args.no_plots


def test_list(capsys):
    assert cli.main(["--list", "--quiet"]) == 0
    out = capsys.readouterr().out
    assert "Saturn V" in out
    assert "Mars" in out


def test_reference(capsys):
    assert cli.main(["--reference", "--quiet"]) == 0
    assert "ORBITAL MECHANICS REFERENCE" in capsys.readouterr().out


def test_checks_only(capsys):
    assert cli.main(["--rocket", "Starship", "--target", "Moon", "--checks-only", "--quiet"]) == 0
    out = capsys.readouterr().out
    assert "PRE-LAUNCH CHECKS" in out
    assert "Rocket: Starship" in out


def test_unknown_rocket(capsys):
    assert cli.main(["--rocket", "Nope", "--quiet"]) == 1
    assert "Unknown rocket 'Nope'" in capsys.readouterr().out


def test_unknown_target(capsys):
    assert cli.main(["--target", "Pluto", "--quiet"]) == 1
    assert "Unknown target 'Pluto'" in capsys.readouterr().out


def test_fast_forward_in_flight(capsys):
    assert cli.main(["--fast-forward", "10", "--quiet"]) == 0
    assert "T+10s" in capsys.readouterr().out


def test_fast_forward_to_completion(capsys):
    assert cli.main(["--fast-forward", "1000", "--quiet"]) == 0
    assert "MISSION COMPLETE" in capsys.readouterr().out


def test_full_run_with_plots(tmp_path, capsys):
    out_dir = tmp_path / "plots"
    assert cli.main(["--quiet", "--output-dir", str(out_dir)]) == 0
    out = capsys.readouterr().out
    assert "Termination reason: Fuel exhausted" in out
    assert len(os.listdir(out_dir)) == 3


def test_full_run_no_plots(tmp_path, capsys, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert cli.main(["--quiet", "--no-plots"]) == 0
    assert not (tmp_path / "plots").exists()
