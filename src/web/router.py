"""Web routes for Jinja2 templates."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates
from pydantic import Field, TypeAdapter, ValidationError

from src.config import get_settings
from src.dependencies import AppState, ClientFactory, get_app_state, get_client_factory
from src.models.schemas import SetupConnectForm, SetupUserForm
from src.services.config_store import ConfigStoreError
from src.services.jellyfin.client import JellyfinError
from src.web.context import get_base_context

logger = logging.getLogger(__name__)

web_router = APIRouter()
templates = Jinja2Templates(directory=get_settings().templates_dir)

# User selection wins when both shapes are present
_setup_form_adapter = TypeAdapter(
    Annotated[SetupUserForm | SetupConnectForm, Field(union_mode="left_to_right")]
)


def _redirect_to_setup() -> RedirectResponse:
    return RedirectResponse(url="/setup", status_code=303)


def _render_setup(
    request: Request,
    state: AppState,
    step: str = "initial",
    status_code: int = 200,
    **extra,
) -> HTMLResponse:
    context = get_base_context(request, state.config)
    context["step"] = step
    context.update(extra)
    return templates.TemplateResponse(request, "setup.html", context, status_code=status_code)


@web_router.get("/", response_class=HTMLResponse, response_model=None)
async def index(
    request: Request,
    state: Annotated[AppState, Depends(get_app_state)],
    client_factory: Annotated[ClientFactory, Depends(get_client_factory)],
) -> HTMLResponse | RedirectResponse:
    """Render library picker, or send the user to setup."""
    config = await state.reload_config()
    if config is None or not config.is_complete:
        return _redirect_to_setup()

    try:
        libraries = await state.ensure_libraries(client_factory(config))
    except JellyfinError as e:
        logger.error(f"Cannot list libraries from {config.jellyfin_url}: {e}")
        return _redirect_to_setup()

    context = get_base_context(request, config)
    context["libraries"] = libraries
    return templates.TemplateResponse(request, "index.html", context)


@web_router.get("/setup", response_class=HTMLResponse)
async def setup_page(
    request: Request,
    state: Annotated[AppState, Depends(get_app_state)],
) -> HTMLResponse:
    """Render setup step 1."""
    return _render_setup(request, state)


async def _connect(
    request: Request,
    form: SetupConnectForm,
    state: AppState,
    client_factory: ClientFactory,
) -> HTMLResponse:
    try:
        config = await state.save_connection(form.jellyfin_url, form.api_key)
    except ConfigStoreError as e:
        logger.error(f"Error saving config: {e}")
        return _render_setup(request, state, status_code=500, error="Error saving config")

    try:
        users = await client_factory(config).list_users()
    except JellyfinError as e:
        logger.error(f"Cannot reach Jellyfin at {config.jellyfin_url}: {e}")
        return _render_setup(
            request,
            state,
            status_code=500,
            error="Unable to connect to Jellyfin. Please check the URL and API key.",
        )

    return _render_setup(request, state, step="user_selection", users=users)


async def _select_user(
    request: Request,
    form: SetupUserForm,
    state: AppState,
    client_factory: ClientFactory,
) -> HTMLResponse | RedirectResponse:
    current = state.config
    if not current.has_connection:
        current = await state.reload_config() or current
    if not current.has_connection:
        return _render_setup(
            request, state, status_code=400, error="URL and API key required"
        )

    try:
        config = await state.save_user(form.user_id, form.user_name)
    except ConfigStoreError as e:
        logger.error(f"Error saving config: {e}")
        return _render_setup(request, state, status_code=500, error="Error saving config")

    try:
        await state.refresh_libraries(client_factory(config))
    except JellyfinError as e:
        logger.error(f"Error retrieving libraries: {e}")
        return _render_setup(
            request, state, status_code=500, error="Error retrieving libraries"
        )

    return RedirectResponse(url="/", status_code=303)


@web_router.post("/setup/connect", response_class=HTMLResponse)
async def setup_connect(
    request: Request,
    state: Annotated[AppState, Depends(get_app_state)],
    client_factory: Annotated[ClientFactory, Depends(get_client_factory)],
    jellyfin_url: Annotated[str, Form()] = "",
    api_key: Annotated[str, Form()] = "",
) -> HTMLResponse:
    """Setup step 1: save server URL and API key, then list users."""
    try:
        form = SetupConnectForm(jellyfin_url=jellyfin_url, api_key=api_key)
    except ValidationError:
        return _render_setup(
            request, state, status_code=400, error="URL and API key required"
        )
    return await _connect(request, form, state, client_factory)


@web_router.post("/setup/user", response_class=HTMLResponse, response_model=None)
async def setup_user(
    request: Request,
    state: Annotated[AppState, Depends(get_app_state)],
    client_factory: Annotated[ClientFactory, Depends(get_client_factory)],
    user_id: Annotated[str, Form()] = "",
    user_name: Annotated[str, Form()] = "",
) -> HTMLResponse | RedirectResponse:
    """Setup step 2: save the selected user and discover libraries."""
    try:
        form = SetupUserForm(user_id=user_id, user_name=user_name)
    except ValidationError:
        return _render_setup(request, state, status_code=400, error="User selection required")
    return await _select_user(request, form, state, client_factory)


@web_router.post("/setup", response_class=HTMLResponse, response_model=None)
async def setup_submit(
    request: Request,
    state: Annotated[AppState, Depends(get_app_state)],
    client_factory: Annotated[ClientFactory, Depends(get_client_factory)],
) -> HTMLResponse | RedirectResponse:
    """Single-endpoint setup form, dispatched on the submitted fields."""
    data = {k: v for k, v in (await request.form()).items() if isinstance(v, str)}
    try:
        form = _setup_form_adapter.validate_python(data)
    except ValidationError:
        return _render_setup(
            request, state, status_code=400, error="URL and API key required"
        )

    if isinstance(form, SetupUserForm):
        return await _select_user(request, form, state, client_factory)
    return await _connect(request, form, state, client_factory)
