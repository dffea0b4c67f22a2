"""Test version consistency in the package."""

import fuzzy_completing_read


def test_version_exists():
    """Test that the package has a version."""
    assert hasattr(fuzzy_completing_read, "__version__")
    assert isinstance(fuzzy_completing_read.__version__, str)
    assert fuzzy_completing_read.__version__ != ""
