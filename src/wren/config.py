"""URL handling configuration.

Codec, archive URL and timeout defaults shared by the parsing, resource and
opener helpers. Resource and opener functions take a ``config`` keyword;
``encode`` and ``decode`` read their default codec from ``DEFAULT_CONFIG``.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class URLConfig:
    """URL handling configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = URLConfig(encoding="gbk", open_timeout=5.0)
    """

    # Percent encoding
    encoding: str = "utf-8"

    # Archives
    archive_scheme: str = "zip"  # Scheme written by get_module_url()
    archive_schemes: tuple[str, ...] = ("zip", "jar")  # Schemes recognised on input
    archive_separator: str = "!/"
    archive_extensions: tuple[str, ...] = (".zip", ".whl", ".egg", ".pyz", ".jar")

    # Opening
    open_timeout: float = 30.0


DEFAULT_CONFIG = URLConfig()
