from pathlib import Path

import pytest

from rcc.driver import compute_output_file, run_preprocessor


def test_compute_output_file_replaces_c_extension():
    assert compute_output_file("foo.c") == Path("foo.i")


def test_compute_output_file_replaces_other_extension():
    assert compute_output_file("path/to/source.cpp") == Path("path/to/source.i")


def test_compute_output_file_adds_extension_when_missing():
    assert compute_output_file("Makefile") == Path("Makefile.i")


def test_compute_output_file_preserves_directory():
    assert compute_output_file("/tmp/dir/program.c") == Path("/tmp/dir/program.i")


def test_compute_output_file_accepts_path():
    assert compute_output_file(Path("a/b.c")) == Path("a/b.i")


def test_run_preprocessor_returns_error_for_missing_binary():
    with pytest.raises(OSError):
        run_preprocessor("/nonexistent/path/to/gcc", "input.c", Path("output.i"))