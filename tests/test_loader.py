import pytest

from flattoml.errors import ConfigFileError, FlatTomlError
from flattoml.loader import load_file


def test_load_file_parses_contents(tmp_path) -> None:
    path = tmp_path / "app.toml"
    path.write_bytes("[app]\nname = \"naïve\"\n".encode("latin-1"))
    config = load_file(path, encoding="latin-1")
    assert config.get_string("app", "name") == "naïve"


def test_load_file_missing_raises(tmp_path) -> None:
    with pytest.raises(ConfigFileError) as excinfo:
        load_file(tmp_path / "missing.toml")
    assert isinstance(excinfo.value, FlatTomlError)
    assert isinstance(excinfo.value.__cause__, OSError)


def test_load_file_unknown_encoding_raises(tmp_path) -> None:
    path = tmp_path / "app.toml"
    path.write_text("[app]\nx = 1\n")
    with pytest.raises(ConfigFileError) as excinfo:
        load_file(path, encoding="no-such-codec")
    assert isinstance(excinfo.value.__cause__, LookupError)
