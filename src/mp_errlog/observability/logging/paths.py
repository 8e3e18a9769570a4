"""Observability – source path normalisation for stack traces.

Absolute source paths are reduced to import-relative ones by stripping a
fixed list of root prefixes:

1. the interpreter's standard-library root,
2. every ``PYTHONPATH`` entry, in order,
3. the directory holding the ``mp_errlog`` package itself.

Installed third-party packages are trimmed the same way whenever their
``site-packages`` shares a root with the project.

Prefixes are applied one after another, so a path that still starts with
the project root after a broader root was removed is trimmed as well.
"""
from __future__ import annotations

import os
import sysconfig
from collections.abc import Iterable, Mapping
from pathlib import Path

_SELF_ROOT = str(Path(os.path.abspath(__file__)).parents[3])


def default_trim_prefixes(environ: Mapping[str, str] | None = None) -> tuple[str, ...]:
    """Return the trim prefixes for this interpreter, each with a trailing separator.

    The project root comes last, in the form it takes once the earlier roots
    have been stripped (``site-packages/`` when installed below the stdlib).
    """
    environ = os.environ if environ is None else environ
    roots = [sysconfig.get_paths()["stdlib"]]
    roots.extend(
        os.path.abspath(entry)
        for entry in environ.get("PYTHONPATH", "").split(os.pathsep)
        if entry
    )
    prefixes = [os.path.join(root, "") for root in roots]
    self_prefix = PathNormalizer(prefixes).normalize(os.path.join(_SELF_ROOT, ""))
    if self_prefix:
        prefixes.append(self_prefix)
    return tuple(prefixes)


def _to_slash(path: str) -> str:
    if os.sep == "/":
        return path
    return path.replace(os.sep, "/")


def _from_slash(path: str) -> str:
    if os.sep == "/":
        return path
    return path.replace("/", os.sep)


class PathNormalizer:
    """Strip known root prefixes from source paths.

    Matching ignores the separator style of either side; the result uses the
    native separator.  Paths under none of the prefixes pass through unchanged.
    """

    def __init__(self, prefixes: Iterable[str] | None = None) -> None:
        if prefixes is None:
            prefixes = default_trim_prefixes()
        self._prefixes = tuple(_to_slash(p) for p in prefixes if p)

    @property
    def prefixes(self) -> tuple[str, ...]:
        return self._prefixes

    def normalize(self, path: str) -> str:
        result = _to_slash(path)
        for prefix in self._prefixes:
            result = result.removeprefix(prefix)
        return _from_slash(result)


__all__ = ["PathNormalizer", "default_trim_prefixes"]
