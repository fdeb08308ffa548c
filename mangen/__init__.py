"""Generate manifests of files with SHA-256 checksums."""

__version__ = "1.0"
__all__ = ["__version__"]