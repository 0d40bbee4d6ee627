"""cdl package: change into a directory and print a compact, adaptive listing.

This package exposes submodules directly; keep __all__ empty to avoid static checks
that expect module-level symbols.
"""

__all__: list[str] = []
