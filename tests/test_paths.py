"""Tests for relative import path computation."""

import pytest

from dartweave.graph.paths import relative_path


@pytest.mark.parametrize(
    "from_path, to_path, expected",
    [
        ("lib/widgets/glass_button.dart", "lib/widgets/glass_container.dart", "glass_container.dart"),
        ("lib/widgets/glass_button.dart", "lib/theme/app_theme_extensions.dart", "../theme/app_theme_extensions.dart"),
        ("lib/core/database/users_table.dart", "lib/core/database/users_table.dart", "users_table.dart"),
        ("lib/features/auth/ui/login_screen.dart", "lib/core/di.dart", "../../../core/di.dart"),
        ("lib/main.dart", "lib/features/auth/ui/login_screen.dart", "features/auth/ui/login_screen.dart"),
        ("main.dart", "lib/app.dart", "lib/app.dart"),
        ("lib/app.dart", "main.dart", "../main.dart"),
        ("lib/theme/colors.dart", "lib/theme.dart", "../theme.dart"),
        ("test/widget_test.dart", "lib/main.dart", "../lib/main.dart"),
    ],
)
def test_relative_path(from_path, to_path, expected):
    assert relative_path(from_path, to_path) == expected


def test_target_file_name_never_matches_a_directory():
    # "theme" is a directory of the source but only the file name of the target.
    assert relative_path("lib/theme/x.dart", "lib/theme") == "../theme"
