import pytest

from base16cs.palette.colorschemes import SELENIZED_LIGHT


@pytest.fixture
def palette():
    return SELENIZED_LIGHT


@pytest.fixture
def write_file():
    """Write UTF-8 text to a file, creating parent directories, and return its path."""

    def _write(path, contents):
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(contents, encoding="utf-8")
        return path

    return _write
