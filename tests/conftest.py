import io
import os
import pathlib
import typing

import pytest


@pytest.fixture
def patch_stdin (monkeypatch: pytest.MonkeyPatch) -> typing.Callable[[str], None]:

	"""Return a helper that replaces sys.stdin with the given text."""

	def _set (text: str) -> None:
		monkeypatch.setattr("sys.stdin", io.StringIO(text))

	return _set


@pytest.fixture
def in_tmp_dir (tmp_path: pathlib.Path, monkeypatch: pytest.MonkeyPatch) -> pathlib.Path:

	"""Run the test from an empty temporary directory so no stray config file is picked up."""

	monkeypatch.chdir(tmp_path)

	assert not os.path.exists("altpitch.yaml")

	return tmp_path
