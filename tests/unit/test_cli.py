#!/usr/bin/env python3
"""
Tests for the command-line entry point (python -m rsimport).
"""

import pytest
from tests.test_utils import SHAPES_SOURCE, SHAPES_SYMBOLS
from rsimport.__main__ import main
from rsimport.utils.config import SEARCH_PATH_ENV_VAR


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv(SEARCH_PATH_ENV_VAR, raising=False)
    return tmp_path


@pytest.mark.cli
class TestListing:
    """Without symbols: path, then kind<TAB>name sorted by name"""

    def test_list_symbols(self, workdir, module_dir, capsys):
        module_dir("shapes", SHAPES_SOURCE)
        assert main(["shapes"]) == 0
        lines = capsys.readouterr().out.splitlines()
        assert lines[0] == "shapes.rs"
        names = [line.split("\t")[1] for line in lines[1:]]
        assert names == sorted(SHAPES_SYMBOLS)
        assert "struct\tPoint" in lines
        assert "impl\timpl_Display" in lines
        assert "fn\tdistance" in lines

    def test_search_path_option(self, workdir, module_dir, capsys):
        module_dir("geo", "pub fn area() -> f64 { 0.0 }", "lib")
        assert main(["-I", "lib", "geo"]) == 0
        out = capsys.readouterr().out
        assert out.splitlines()[0].endswith("geo.rs")
        assert "fn\tarea" in out

    def test_search_path_environment(self, workdir, module_dir, capsys, monkeypatch):
        module_dir("geo", "pub fn area() -> f64 { 0.0 }", "env")
        monkeypatch.setenv(SEARCH_PATH_ENV_VAR, str(workdir / "env"))
        assert main(["geo"]) == 0
        assert "fn\tarea" in capsys.readouterr().out

    def test_option_paths_come_before_environment(self, workdir, module_dir, capsys, monkeypatch):
        module_dir("geo", "fn from_option() {}", "opt")
        module_dir("geo", "fn from_env() {}", "env")
        monkeypatch.setenv(SEARCH_PATH_ENV_VAR, str(workdir / "env"))
        assert main(["-I", "opt", "geo"]) == 0
        out = capsys.readouterr().out
        assert "from_option" in out
        assert "from_env" not in out

    def test_qualified_impl_keys(self, workdir, module_dir, capsys):
        module_dir("shapes", SHAPES_SOURCE)
        assert main(["--qualified-impl-keys", "shapes"]) == 0
        out = capsys.readouterr().out
        assert "impl\timpl_Display_for_Point" in out
        assert "impl\timpl_Display\n" not in out

    def test_token_stream_impl_keys(self, workdir, module_dir, capsys):
        module_dir("wrap", "pub struct Wrapper<T>(T);\nimpl<T> Wrapper<T> {}\n")
        assert main(["--token-stream-impl-keys", "wrap"]) == 0
        assert "impl\timpl_Wrapper < T >" in capsys.readouterr().out

    def test_impl_key_options_are_exclusive(self, workdir, module_dir):
        module_dir("shapes", SHAPES_SOURCE)
        with pytest.raises(SystemExit):
            main(["--qualified-impl-keys", "--token-stream-impl-keys", "shapes"])

    def test_verbose(self, workdir, module_dir, capsys):
        module_dir("shapes", SHAPES_SOURCE)
        assert main(["-v", "shapes"]) == 0


@pytest.mark.cli
class TestSymbolSource:
    """With symbols: each symbol's source, blank-line separated"""

    def test_print_symbols(self, workdir, module_dir, capsys):
        module_dir("shapes", SHAPES_SOURCE)
        assert main(["shapes", "Marker", "Meters"]) == 0
        assert capsys.readouterr().out == "struct Marker;\n\npub struct Meters(pub f64);\n"

    def test_missing_symbol(self, workdir, module_dir, capsys):
        module_dir("shapes", SHAPES_SOURCE)
        assert main(["shapes", "Hexagon"]) == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err == "rsimport: error: Symbol 'Hexagon' not found in module 'shapes'\n"


@pytest.mark.cli
class TestErrors:
    """Failures go to stderr with exit status 1"""

    def test_missing_module(self, workdir, capsys):
        assert main(["nope"]) == 1
        assert capsys.readouterr().err.startswith("rsimport: error: Module 'nope' not found")

    def test_parse_error(self, workdir, module_dir, capsys):
        module_dir("broken", "struct 1;")
        assert main(["broken"]) == 1
        err = capsys.readouterr().err
        assert err.startswith("rsimport: error: Failed to parse module 'broken'")
        assert "broken.rs:1:" in err
