"""Verify package imports work correctly."""


def test_import_kagscript() -> None:
    """Test that kagscript can be imported and version matches pyproject."""
    import tomllib
    from pathlib import Path

    import kagscript

    with (Path(__file__).resolve().parent.parent / "pyproject.toml").open("rb") as f:
        expected = tomllib.load(f)["project"]["version"]
    assert kagscript.__version__ == expected


def test_version_format() -> None:
    """Test version string format."""
    from kagscript import __version__

    parts = __version__.split(".")
    assert len(parts) == 3
    assert all(part.isdigit() for part in parts)


def test_public_api_exports() -> None:
    import kagscript

    for name in kagscript.__all__:
        assert hasattr(kagscript, name), name
