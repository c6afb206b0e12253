"""CLI tests through typer's CliRunner."""

from typer.testing import CliRunner

from package_analyser.cli import app

runner = CliRunner()

A_GO = '''package demo

import (
	"fmt"
	"os"
)

// Hello prints the arguments.
func Hello() { fmt.Println(os.Args) }
'''

B_GO = '''package demo

import "fmt"

func A() {}
func B() {}
func C() { fmt.Println() }
func internal() {}
'''

C_GO = "package demo\n\nfunc Only() {}\n"


def _demo(tmp_path, go_file):
    go_file(tmp_path, "a.go", A_GO)
    go_file(tmp_path, "b.go", B_GO)
    go_file(tmp_path, "c.go", C_GO)
    return tmp_path


def test_cli_local_report(tmp_path, go_file):
    result = runner.invoke(app, [str(_demo(tmp_path, go_file))])
    assert result.exit_code == 0, result.output
    lines = result.output.splitlines()
    assert "Package 'demo' has 5 exported function(s) across 3 file(s)" in lines
    assert lines[-1] == 'Importing the following: ["fmt" "os"]'
    # five histogram rows above the summary
    assert len(lines) == 7


def test_cli_bins_option(tmp_path, go_file):
    result = runner.invoke(app, [str(_demo(tmp_path, go_file)), "--bins", "3", "-t"])
    assert result.exit_code == 0, result.output
    assert len(result.output.splitlines()) == 5


def test_cli_config_file(tmp_path, go_file):
    cfg = tmp_path / "cfg.yaml"
    cfg.write_text("bins: 2\nbar_width: 4\n")
    pkg = tmp_path / "pkg"
    pkg.mkdir()
    _demo(pkg, go_file)
    result = runner.invoke(app, [str(pkg), "-c", str(cfg)])
    assert result.exit_code == 0, result.output
    lines = result.output.splitlines()
    assert len(lines) == 4
    assert "████ 2" in lines[0]


def test_cli_empty_dir(tmp_path):
    result = runner.invoke(app, [str(tmp_path)])
    assert result.exit_code == 0, result.output
    assert f"Package '{tmp_path.name}' has 0 exported function(s) across 0 file(s)" in result.output
    assert "Importing the following: []" in result.output


def test_cli_invalid_locator():
    result = runner.invoke(app, ["github.com/onlyowner"])
    assert result.exit_code == 1
    assert "Invalid locator: github.com/onlyowner" in result.output


def test_cli_missing_directory(tmp_path):
    result = runner.invoke(app, [str(tmp_path / "missing")])
    assert result.exit_code == 1
    assert "Directory not found" in result.output


def test_cli_parse_failure_prints_no_report(tmp_path, go_file):
    _demo(tmp_path, go_file)
    go_file(tmp_path, "z.go", "package demo\nfunc Broken( {\n")
    result = runner.invoke(app, [str(tmp_path)])
    assert result.exit_code == 1
    assert "z.go" in result.output
    assert "exported function(s)" not in result.output
