"""Relative import paths between artifacts.

Artifact locations are ``/``-separated strings in a virtual tree; they
never touch the real file system, so :mod:`os.path` is not used here.
"""

from __future__ import annotations

SEPARATOR = "/"
PARENT = ".."


def relative_path(from_path: str, to_path: str) -> str:
    """Return the import path that leads from *from_path* to *to_path*.

    *from_path* is treated as a file, so its last segment is dropped
    before comparing.  The last segment of *to_path* is its file name and
    never takes part in the common-prefix match.

    Examples::

        >>> relative_path("lib/widgets/glass_button.dart", "lib/widgets/glass_container.dart")
        'glass_container.dart'
        >>> relative_path("lib/widgets/glass_button.dart", "lib/theme/app_theme_extensions.dart")
        '../theme/app_theme_extensions.dart'

    Args:
        from_path: Path of the importing artifact.
        to_path: Path of the imported artifact.

    Returns:
        ``..`` segments followed by the remaining segments of *to_path*,
        joined with ``/``.
    """
    from_dirs = from_path.split(SEPARATOR)[:-1]
    to_parts = to_path.split(SEPARATOR)
    to_dirs = to_parts[:-1]

    common = 0
    for source, target in zip(from_dirs, to_dirs):
        if source != target:
            break
        common += 1

    ups = [PARENT] * (len(from_dirs) - common)
    return SEPARATOR.join(ups + to_parts[common:])
