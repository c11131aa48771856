"""Top-level package for the structural diary.

Provides subpackages:
- structural_diary.core – section data model
- structural_diary.builder – sectioning, sampling and note writing
- structural_diary.settings – persisted preferences
- structural_diary.cli – command line interface
"""


def _get_version() -> str:
    """Get version from pyproject.toml (dev) or importlib.metadata (installed)."""
    from pathlib import Path

    pyproject = Path(__file__).resolve().parent.parent.parent / "pyproject.toml"
    if pyproject.exists():
        try:
            content = pyproject.read_text()
            for line in content.splitlines():
                if line.strip().startswith("version"):
                    # Parse: version = "0.3.0"
                    return line.split("=")[1].strip().strip('"').strip("'")
        except OSError:
            pass

    try:
        from importlib.metadata import PackageNotFoundError, version as pkg_version
        return pkg_version("structural-diary")
    except PackageNotFoundError:
        return "0.0.0"


__version__ = _get_version()
__all__: list[str] = ["__version__"]
