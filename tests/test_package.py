"""Tests for package structure and imports."""

import pytest


@pytest.mark.unit
def test_package_imports():
    """Package imports without errors."""
    import tablecopy

    assert tablecopy is not None


@pytest.mark.unit
def test_version_accessible():
    from tablecopy import __version__

    assert isinstance(__version__, str)
    assert len(__version__) > 0


@pytest.mark.unit
def test_version_format():
    """Version follows semver format."""
    from tablecopy import __version__

    parts = __version__.split(".")
    assert len(parts) == 3
    for part in parts:
        assert part.isdigit()
