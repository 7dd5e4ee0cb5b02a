"""Git LFS Scripts - wildcard-extension front ends for git and git-lfs."""

__version__ = "1.0.0"

__all__ = ["__version__"]
