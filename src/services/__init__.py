"""Jellyfin service layer."""
