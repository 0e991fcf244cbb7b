"""Verify package imports work correctly."""


def test_import_matchlex() -> None:
    """Test that matchlex can be imported and version matches pyproject."""
    import tomllib
    from pathlib import Path

    import matchlex

    with (Path(__file__).resolve().parent.parent / "pyproject.toml").open("rb") as f:
        expected = tomllib.load(f)["project"]["version"]
    assert matchlex.__version__ == expected


def test_version_format() -> None:
    """Test version string format."""
    from matchlex import __version__

    parts = __version__.split(".")
    assert len(parts) == 3
    assert all(part.isdigit() for part in parts)


def test_public_names_resolve() -> None:
    """Every name in __all__ is importable from the package root."""
    import matchlex

    for name in matchlex.__all__:
        assert hasattr(matchlex, name), name
