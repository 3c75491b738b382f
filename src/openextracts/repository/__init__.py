"""Persistence adapters for location records."""

from openextracts.repository.json_store import JsonLocationDatabase, LocationStoreError

__all__ = ["JsonLocationDatabase", "LocationStoreError"]
