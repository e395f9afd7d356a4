"""
Adaptateurs de stockage cle-valeur.

- DiskCacheStorage : stockage persistant sur disque via diskcache
"""

from cinescope.adapters.storage.disk_storage import DiskCacheStorage

__all__ = ["DiskCacheStorage"]
