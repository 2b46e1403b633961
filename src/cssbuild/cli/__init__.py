from cssbuild.cli.main import cli

__all__ = ["cli"]
