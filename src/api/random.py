"""Random movie API endpoint."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, Request
from fastapi.responses import RedirectResponse

from src.dependencies import AppState, ClientFactory, get_app_state, get_client_factory
from src.models.schemas import MovieResponse
from src.services.jellyfin.client import JellyfinError
from src.services.picker import NoMoviesError, build_movie_response, pick_random
from src.utils.logging import LogContext
from src.utils.request import get_client_ip

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/random", response_model=MovieResponse, responses={303: {"description": "Setup required"}})
async def random_movie(
    request: Request,
    state: Annotated[AppState, Depends(get_app_state)],
    client_factory: Annotated[ClientFactory, Depends(get_client_factory)],
    library: Annotated[str | None, Query(description="Library (media folder) ID")] = None,
) -> MovieResponse | RedirectResponse:
    """Pick a random movie from a library."""
    if not library:
        raise HTTPException(status_code=400, detail="Library ID required")

    config = await state.reload_config()
    if config is None or not config.is_complete:
        return RedirectResponse(url="/setup", status_code=303)

    log = LogContext(
        logger,
        ip=get_client_ip(request),
        agent=request.headers.get("user-agent", "-"),
    )
    client = client_factory(config)

    try:
        movies = await client.list_movies(library)
        movie = pick_random(movies)
    except JellyfinError as e:
        log.error(f"Error retrieving movies for library {library}: {e}")
        raise HTTPException(status_code=502, detail="Error retrieving movie")
    except NoMoviesError:
        log.warning(f"No movies found in library {library}")
        raise HTTPException(status_code=500, detail="Error retrieving movie")

    log.info(f"Suggested movie: {movie.name}")
    return build_movie_response(movie, client)
