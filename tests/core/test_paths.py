import pytest

from dirlet.core.paths import resolve_local_path


@pytest.mark.parametrize("repo_path, name, local_root, expected", [
    # mirror root sits one level below the repository root
    ("tesseract/example/cli", "cli", "example", "example/cli"),
    # mirror root equals the remote directory
    ("m4/ax_check.m4", "ax_check.m4", "m4", "m4/ax_check.m4"),
    # several levels deep remotely, shallow locally
    ("a/b/c/pkg/sub/file.go", "file.go", "pkg/sub", "pkg/sub/file.go"),
    ("lib/tools/data/nested", "nested", "tools/data", "tools/data/nested"),
])
def test_resolve_local_path(repo_path, name, local_root, expected):
    assert resolve_local_path(repo_path, name, local_root) == expected


def test_resolve_local_path_falls_back_to_join():
    assert resolve_local_path("somewhere/else/x.txt", "x.txt", "pkg") == "pkg/x.txt"


def test_resolve_local_path_keeps_remainder_after_first_match():
    assert resolve_local_path("src/pkg/a/pkg/a/f", "a", "pkg") == "pkg/a/pkg/a/f"


def test_resolve_local_path_uses_posix_separators():
    assert "\\" not in resolve_local_path("x/root/child", "child", "root")
