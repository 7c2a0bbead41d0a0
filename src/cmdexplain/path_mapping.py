"""Turn ``--knowledge`` and ``--log`` arguments into absolute paths."""

from __future__ import annotations

from pathlib import Path

from .errors import PathMappingError

_HOME_PREFIX = "~"
_PACKAGE_PREFIX = "@"


def map_path(raw: str, *, app_root_abs: Path) -> Path:
    """Map a path argument to an absolute path.

    ``~`` expands to the home directory and ``@`` to the installed package
    directory, so ``@/data/commands.json`` names the bundled knowledge file.
    Anything else must already be absolute.
    """
    if not app_root_abs.is_absolute():
        raise PathMappingError("app_root_abs must be an absolute path.")
    if "\0" in raw:
        raise PathMappingError("Path contains NUL (\\0) character.")

    if raw.startswith(_PACKAGE_PREFIX):
        rest = raw[len(_PACKAGE_PREFIX):].lstrip("/\\")
        mapped = app_root_abs / rest if rest else app_root_abs
    else:
        mapped = Path(raw).expanduser() if raw.startswith(_HOME_PREFIX) else Path(raw)

    if not mapped.is_absolute():
        raise PathMappingError(
            "Relative paths are not accepted. "
            "Use ~ (home), @ (package directory), or an absolute path."
        )
    return mapped.resolve()
