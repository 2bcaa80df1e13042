"""FastAPI integration: return views from endpoints and get SVG responses."""

from __future__ import annotations

import inspect
import logging
from functools import wraps
from inspect import isawaitable
from typing import Any, Callable

from fastapi import Response
from fastapi.datastructures import DefaultPlaceholder
from fastapi.routing import APIRoute

from .context import Configuration
from .core import View, arender_bytes, render_bytes

logger = logging.getLogger(__name__)

SVG_MEDIA_TYPE = "image/svg+xml"


class SVGResponse(Response):
    media_type = SVG_MEDIA_TYPE


async def render_svg(
    result: Any, configuration: Configuration | None = None
) -> SVGResponse | None:
    """Render a view (or pre-rendered bytes/str) to an SVGResponse."""
    if isinstance(result, View):
        return SVGResponse(await arender_bytes(result, configuration))

    if isinstance(result, (bytes, str)):
        return SVGResponse(result)

    return None


class SVGRoute(APIRoute):
    """
    Route that auto-converts returned views to SVGResponse.

    Usage:
        router = APIRouter(route_class=SVGRoute)

        @router.get("/badge.svg")
        async def badge(label: str):
            return svg(text(label, x=10, y=20), width=100, height=30)

    Responses returned by the endpoint are passed through untouched. Subclass
    and set `configuration` to change output formatting.
    """

    configuration: Configuration | None = None

    def __init__(self, path: str, endpoint: Callable[..., Any], **kwargs):
        sig = inspect.signature(endpoint)
        configuration = self.configuration

        @wraps(endpoint)
        async def svg_endpoint(**kw):
            result = endpoint(**kw)

            if isawaitable(result):
                result = await result

            if hasattr(result, "status_code"):
                return result

            if not isinstance(result, View):
                return result

            logger.debug(f"rendering {type(result).__name__} for {path}")
            return await render_svg(result, configuration)

        svg_endpoint.__signature__ = sig  # type: ignore

        # A return annotation naming a view type is not a response model.
        if isinstance(kwargs.get("response_model"), DefaultPlaceholder):
            kwargs["response_model"] = None

        super().__init__(path, svg_endpoint, **kwargs)


def svg_response(view: View, configuration: Configuration | None = None, **kwargs) -> Response:
    """Render a view synchronously into an SVGResponse, for plain routes."""
    return SVGResponse(render_bytes(view, configuration), **kwargs)
