import logging
from pathlib import Path

from ..errors import TemplateIOError

logger = logging.getLogger(__name__)

PARTIAL_SUFFIX = ".liquid"


def find_partials(dirpath):
    """List the partial files directly inside a directory, sorted by name."""
    dirpath = Path(dirpath)
    if not dirpath.is_dir():
        raise TemplateIOError(f"Partials directory does not exist: {dirpath}")
    return sorted(
        (p for p in dirpath.glob(f"*{PARTIAL_SUFFIX}") if not p.is_dir()),
        key=lambda p: p.name,
    )


def read_template_file(path):
    try:
        with open(path, encoding="utf-8") as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as err:
        raise TemplateIOError(f"Could not read template file: {path}") from err


def load_partials(dirpaths):
    """Read every partial in the given directories, keyed by file basename.

    Directories are searched in the given order. When the same basename is
    found in more than one directory, the last one read wins.

    Args:
        dirpaths: Iterable of directory paths

    Returns:
        dict: basename -> (path, source)
    """
    partials = {}
    for dirpath in dirpaths:
        for path in find_partials(dirpath):
            if path.name in partials:
                logger.warning(
                    "Partial %s overrides %s", path, partials[path.name][0]
                )
            partials[path.name] = (path, read_template_file(path))
            logger.debug("Loaded partial %s from %s", path.name, path)
    return partials
