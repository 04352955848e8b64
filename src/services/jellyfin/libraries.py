"""Movie library discovery.

A media folder counts as a movie library when Jellyfin declares it as one,
or, for folders without a collection type, when it actually contains movies.
"""

import logging

from src.constants import JELLYFIN_COLLECTION_MOVIES
from src.models.schemas import Library
from src.services.jellyfin.client import JellyfinClient, JellyfinError
from src.services.jellyfin.schemas import MediaFolder

logger = logging.getLogger(__name__)


async def classify_libraries(
    client: JellyfinClient,
    folders: list[MediaFolder],
) -> list[Library]:
    """Keep the folders that hold movies, in listing order.

    Args:
        client: Client used to probe folders without a collection type
        folders: Folders from `list_media_folders()`

    Returns:
        Movie libraries
    """
    libraries: list[Library] = []

    for folder in folders:
        if folder.collection_type == JELLYFIN_COLLECTION_MOVIES:
            libraries.append(Library(name=folder.name, id=folder.id))
            continue

        if folder.collection_type:
            continue

        # Mixed-content folder: probe failures exclude it
        try:
            has_movies = await client.probe_library_has_movies(folder.id)
        except JellyfinError as e:
            logger.debug(f"Skipping folder {folder.name} ({folder.id}): probe failed: {e}")
            continue

        if has_movies:
            libraries.append(Library(name=folder.name, id=folder.id))

    logger.info(f"Found {len(libraries)} movie libraries out of {len(folders)} folders")
    return libraries


async def discover_libraries(client: JellyfinClient) -> list[Library]:
    """Fetch media folders and classify them.

    Raises:
        JellyfinError: If the folder listing fails
    """
    folders = await client.list_media_folders()
    return await classify_libraries(client, folders)
