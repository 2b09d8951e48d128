"""
View Responses
Render views into Sanic HTML responses
"""
import asyncio
from typing import Dict, Optional

from sanic.response import HTTPResponse, html

from tinyview.logging import getLogger
from tinyview.view.view import View

logger = getLogger(__name__)


async def render_view(
    view: View,
    status: int = 200,
    headers: Optional[Dict[str, str]] = None
) -> HTTPResponse:
    """
    Render a view and wrap it in an HTML response

    Rendering runs in a worker thread to avoid blocking the event loop.
    Render errors propagate so Sanic's error handler can report them.

    Example:
        @app.get('/')
        async def home(request):
            return await render_view(factory.make('home.py', {'title': 'Home'}))
    """
    content = await asyncio.to_thread(view.render)
    logger.debug("Rendered %s (%d chars)", view.get_template_path(), len(content))

    return html(content, status=status, headers=headers)
