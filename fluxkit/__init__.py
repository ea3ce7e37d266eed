"""Register file, FLUX.MD document parser and a small arithmetic expression front end."""

__version__ = "0.1.0"