import logging

from ignorewalk.utils.gitignore import GitignoreSpec


def test_empty_spec_excludes_nothing() -> None:
    spec = GitignoreSpec.empty()
    assert spec.matches("a.log") is False
    assert spec.matches("dir", is_dir=True) is False
    assert len(spec) == 0


def test_extend_leaves_parent_untouched() -> None:
    base = GitignoreSpec.empty().extend(["*.log", "**/*.log"])
    child = base.extend(["!sub/keep.log"])

    assert base.matches("sub/keep.log") is True
    assert child.matches("sub/keep.log") is False
    assert base.patterns == ["*.log", "**/*.log"]
    assert child.patterns == ["*.log", "**/*.log", "!sub/keep.log"]


def test_extend_with_nothing_returns_same_spec() -> None:
    base = GitignoreSpec.empty().extend(["*.log"])
    assert base.extend([]) is base
    assert base.extend([""]) is base


def test_siblings_do_not_see_each_other() -> None:
    base = GitignoreSpec.empty()
    left = base.extend(["left/secret.txt"])
    right = base.extend(["right/secret.txt"])

    assert left.matches("left/secret.txt") is True
    assert left.matches("right/secret.txt") is False
    assert right.matches("left/secret.txt") is False


def test_later_levels_win() -> None:
    spec = (
        GitignoreSpec.empty()
        .extend(["*.log", "**/*.log"])
        .extend(["!sub/keep.log"])
        .extend(["sub/keep.log"])
    )
    assert spec.matches("sub/keep.log") is True
    assert spec.depth == 4


def test_later_pattern_in_same_level_wins() -> None:
    spec = GitignoreSpec.empty().extend(["!keep.log", "*.log"])
    assert spec.matches("keep.log") is True


def test_directory_only_pattern() -> None:
    spec = GitignoreSpec.empty().extend(["build/"])
    assert spec.matches("build", is_dir=True) is True
    assert spec.matches("build", is_dir=False) is False
    assert spec.matches("build/out.o") is True


def test_anchored_pattern_stays_in_place() -> None:
    spec = GitignoreSpec.empty().extend(["a/build"])
    assert spec.matches("a/build") is True
    assert spec.matches("a/b/build") is False
    assert spec.matches("build") is False


def test_double_star_leaves_the_directory_itself_alone() -> None:
    spec = GitignoreSpec.empty().extend(["foo/**", "!foo/keep.txt"])
    assert spec.matches("foo", is_dir=True) is False
    assert spec.matches("foo/keep.txt") is False
    assert spec.matches("foo/drop.txt") is True


def test_invalid_pattern_is_dropped_with_warning(caplog) -> None:
    with caplog.at_level(logging.WARNING, logger="ignorewalk"):
        spec = GitignoreSpec.empty().extend(["foo\\", "*.log"])

    assert spec.patterns == ["*.log"]
    assert spec.matches("a.log") is True
    assert any("Skipping invalid ignore pattern" in r.getMessage() for r in caplog.records)
