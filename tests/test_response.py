"""Tests for rendering views into Sanic responses"""

import pytest
from sanic.response import HTTPResponse

from tinyview.exceptions import InvalidArgumentException
from tinyview.http import render_view
from tinyview.view import View


@pytest.mark.asyncio
async def test_render_view_returns_html_response(write_template):
    page = write_template("page.py", 'echo("<h1>", title, "</h1>")\n')

    response = await render_view(View({"title": "Home"}, page))

    assert isinstance(response, HTTPResponse)
    assert response.status == 200
    assert response.body == b"<h1>Home</h1>"
    assert response.content_type.startswith("text/html")


@pytest.mark.asyncio
async def test_render_view_status_and_headers(write_template):
    page = write_template("page.py", 'echo("gone")\n')

    response = await render_view(View({}, page), status=410, headers={"X-Reason": "removed"})

    assert response.status == 410
    assert response.headers["X-Reason"] == "removed"


@pytest.mark.asyncio
async def test_render_view_propagates_errors():
    with pytest.raises(InvalidArgumentException, match="Template file path is empty."):
        await render_view(View())
