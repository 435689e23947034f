"""Resource URLs — where a module lives and what backs it.

``sys.path`` plays the role of a class path: its entries are directories
or archives, and every importable module has a URL inside one of them.

Two URL shapes are understood:

- ``file:///srv/app/src/pkg/mod.py``: a file on disk
- ``zip:file:///srv/app/lib.zip!/pkg/mod.py``: an entry inside an archive
  (``jar:`` is accepted as an alias)

Directory detection is a best-effort heuristic: a ``file:`` URL is a
directory when its local path is one. Archive URLs are never directories.
"""

import importlib
import logging
import os
import sys
import zipimport
from pathlib import Path
from types import ModuleType
from urllib.parse import urlsplit
from urllib.request import url2pathname

from wren.config import DEFAULT_CONFIG, URLConfig

logger = logging.getLogger("wren.resources")


def get_module_url(module: ModuleType | str, config: URLConfig = DEFAULT_CONFIG) -> str | None:
    """Return the URL of the file backing *module*.

    *module* may be a module object or an importable dotted name.
    Built-in and namespace modules have no backing file and give ``None``.
    """
    if isinstance(module, str):
        module = importlib.import_module(module)

    filename = getattr(module, "__file__", None)
    if not filename:
        return None

    loader = getattr(module, "__loader__", None)
    if isinstance(loader, zipimport.zipimporter):
        archive = Path(loader.archive)
        entry = Path(filename).relative_to(archive).as_posix()
        archive_url = archive.absolute().as_uri()
        return f"{config.archive_scheme}:{archive_url}{config.archive_separator}{entry}"

    return Path(filename).absolute().as_uri()


def is_directory_url(url: str | None, config: URLConfig = DEFAULT_CONFIG) -> bool:
    """Return ``True`` if *url* points at a directory on the local filesystem."""
    if not url or _split_archive_url(url, config) is not None:
        return False
    path = _local_path(url)
    return path is not None and path.is_dir()


def resolve_relative_path(url: str | None, config: URLConfig = DEFAULT_CONFIG) -> str | None:
    """Return the path of *url* relative to the ``sys.path`` entry holding it.

    >>> resolve_relative_path("zip:file:///srv/lib.zip!/pkg/mod.py")
    'pkg/mod.py'

    A URL naming an archive file itself, or a file outside every
    ``sys.path`` entry, gives ``None``.
    """
    if not url:
        return None
    split = _split_archive_url(url, config)
    if split is not None:
        return split[1] or None

    path = _local_path(url)
    if path is None:
        return None

    archive = resolve_archive_file(url, config=config)
    if archive is not None:
        if archive == path:
            return None
        return path.relative_to(archive).as_posix()

    absolute = os.path.abspath(path)
    best: str | None = None
    for entry in sys.path:
        root = os.path.abspath(entry or os.curdir)
        if absolute == root or not absolute.startswith(root.rstrip(os.sep) + os.sep):
            continue
        if best is None or len(root) > len(best):
            best = root
    if best is None:
        return None
    return Path(os.path.relpath(absolute, best)).as_posix()


def resolve_archive_file(
    url: str | None,
    extension: str | None = None,
    config: URLConfig = DEFAULT_CONFIG,
) -> Path | None:
    """Return the archive file backing *url*, or ``None``.

    Understands archive URLs and ``file:`` URLs whose path runs through an
    archive (``/srv/lib.zip/pkg/mod.py``, the form ``zipimport`` uses for
    ``__file__``). When *extension* is given (``".whl"`` or ``"whl"``),
    only archives with that suffix count.
    """
    if not url:
        return None
    if extension is not None:
        suffixes: tuple[str, ...] = ("." + extension.lower().lstrip("."),)
    else:
        suffixes = tuple(s.lower() for s in config.archive_extensions)

    split = _split_archive_url(url, config)
    if split is not None:
        archive = _local_path(split[0])
        if archive is None or archive.suffix.lower() not in suffixes:
            return None
        return archive

    path = _local_path(url)
    if path is None:
        return None
    for candidate in (path, *path.parents):
        if candidate.suffix.lower() in suffixes and candidate.is_file():
            logger.debug("Resolved archive %s for %s", candidate, url)
            return candidate
    return None


def _split_archive_url(url: str, config: URLConfig) -> tuple[str, str] | None:
    scheme, _, rest = url.partition(":")
    if scheme.lower() not in config.archive_schemes:
        return None
    archive_url, sep, entry = rest.partition(config.archive_separator)
    if not sep:
        return None
    return archive_url, entry


def _local_path(url: str) -> Path | None:
    parts = urlsplit(url)
    if parts.scheme != "file":
        return None
    return Path(url2pathname(parts.path))
