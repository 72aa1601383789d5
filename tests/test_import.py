"""Verify package imports work correctly."""


def test_import_marcas() -> None:
    """Test that marcas can be imported and version matches pyproject."""
    import tomllib
    from pathlib import Path

    import marcas

    with (Path(__file__).resolve().parent.parent / "pyproject.toml").open("rb") as f:
        expected = tomllib.load(f)["project"]["version"]
    assert marcas.__version__ == expected


def test_submodules_import() -> None:
    """Every public submodule imports on its own."""
    import importlib

    for name in (
        "marcas.config",
        "marcas.densify",
        "marcas.errors",
        "marcas.lexer",
        "marcas.nodes",
        "marcas.parser",
        "marcas.parsing",
        "marcas.serialization",
        "marcas.span",
        "marcas.text",
        "marcas.tokens",
        "marcas.utils",
        "marcas.visitor",
    ):
        importlib.import_module(name)
