"""Jellypick: random movie picker for Jellyfin."""
