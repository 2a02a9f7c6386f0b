"""Predefined dependency lists for the built-in Flutter widget templates."""

from __future__ import annotations

FLUTTER_DEPENDENCIES: dict[str, tuple[str, ...]] = {
    "lib/widgets/glass_container.dart": (
        "lib/widgets/noise_overlay.dart",
        "lib/theme/app_shadows.dart",
        "lib/theme/app_theme_extensions.dart",
    ),
    "lib/widgets/glass_button.dart": (
        "lib/widgets/glass_container.dart",
        "lib/theme/app_theme_extensions.dart",
    ),
    "lib/widgets/glass_bottomsheet.dart": (
        "lib/theme/app_theme_extensions.dart",
    ),
    "lib/theme/app_theme.dart": (
        "lib/theme/app_theme_extensions.dart",
        "lib/theme/app_text_shadows.dart",
    ),
}


def dependencies_for(path: str) -> tuple[str, ...]:
    """Return the preset dependencies of *path*, or an empty tuple."""
    return FLUTTER_DEPENDENCIES.get(path, ())
