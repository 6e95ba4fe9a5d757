"""Application services shared by every user interface."""

from .package_service import PackageAlbumService, PackageRequest

__all__ = ["PackageAlbumService", "PackageRequest"]
