"""
View
Template variables plus the template and layout they are rendered with
"""
from functools import partial
from typing import Any, Dict, Optional, TYPE_CHECKING

from tinyview.defaults import DEFAULT_HELPER_EVENT_PREFIX
from tinyview.events import Event
from tinyview.exceptions import InvalidArgumentException
from tinyview.logging import getLogger
from tinyview.view.engines import PythonTemplateEngine, TemplateEngine

if TYPE_CHECKING:
    from tinyview.events import EventManager

logger = getLogger(__name__)


class HelperProxy:
    """
    Attribute-style access to view helpers

    view.helpers.url('home') is view.call_helper('url', 'home')
    Helpers take positional arguments only.
    """

    def __init__(self, view: 'View'):
        self._view = view

    def __getattr__(self, name: str):
        if name.startswith('_'):
            raise AttributeError(name)
        return partial(self._view.call_helper, name)


class View:
    """
    A renderable view

    The template is rendered with the view variables, `variables` (the
    whole mapping) and `view` (this object) in scope; a variable of the
    same name wins over `variables` and `view`. When a layout is set it is
    rendered afterwards with the same scope plus `content`, the template
    output, which always wins over a variable named `content`. The layout
    output replaces the template output. Rendering twice gives the same
    result.

    Every public attribute name resolves: `view.<name>` reads the variable
    and is None when it is missing or falsy. `hasattr(view, name)` is
    therefore always true, and so is `view.name is defined` in Jinja; test
    the value, or look the name up in `get_variables()`.

    Helpers are not methods of the view: calling one triggers the event
    "view.call.helper.<name>" on the attached event manager and returns
    what the first subscriber stored in the event data.

    Example:
        view = View({'title': 'Home'}, 'templates/home.py', 'templates/layout.py')
        view.set_event_manager(manager)
        html = view.render()
    """

    EVENT_CALL_VIEW_HELPER = DEFAULT_HELPER_EVENT_PREFIX

    def __init__(
        self,
        variables: Optional[Dict[str, Any]] = None,
        template_path: Optional[str] = None,
        layout_path: Optional[str] = None,
        engine: Optional[TemplateEngine] = None
    ):
        self._variables = variables if variables is not None else {}
        self._template_path = template_path
        self._layout_path = layout_path
        self._engine = engine or PythonTemplateEngine()
        self._event_manager: Optional['EventManager'] = None
        self._content: Optional[str] = None

    def get_variables(self) -> Dict[str, Any]:
        return self._variables

    def get_template_path(self) -> Optional[str]:
        return self._template_path

    def set_template_path(self, path: str) -> 'View':
        self._template_path = path
        return self

    def get_layout_path(self) -> Optional[str]:
        return self._layout_path

    def set_layout_path(self, path: str) -> 'View':
        self._layout_path = path
        return self

    def set_event_manager(self, event_manager: 'EventManager'):
        self._event_manager = event_manager

    def get_event_manager(self) -> Optional['EventManager']:
        return self._event_manager

    def get_engine(self) -> TemplateEngine:
        return self._engine

    def set_engine(self, engine: TemplateEngine) -> 'View':
        self._engine = engine
        return self

    def get_content(self) -> Optional[str]:
        """Output of the last render, None before the first one"""
        return self._content

    def get_variable(self, name: str) -> Any:
        """
        Read a variable

        Returns:
            The value, or None when the variable is missing or falsy
            (0, '', False, None and empty containers all read as None)
        """
        value = self._variables.get(name)
        if value:
            return value
        return None

    def __getattr__(self, name: str) -> Any:
        # Only reached for names that are not real attributes
        if name.startswith('_'):
            raise AttributeError(name)
        return self.get_variable(name)

    @property
    def helpers(self) -> HelperProxy:
        return HelperProxy(self)

    def call_helper(self, name: str, /, *arguments, **keyword_arguments) -> Any:
        """
        Call a view helper through the event manager

        Only the first subscriber of the helper event is invoked.

        Args:
            name: Helper name
            *arguments: Passed to the helper as event data['arguments']
            **keyword_arguments: Not supported; helpers take positional
                arguments only

        Returns:
            The event data after dispatch

        Raises:
            InvalidArgumentException: No event manager, nobody listens, or
                keyword arguments were passed
        """
        event_name = self.EVENT_CALL_VIEW_HELPER + name

        if (self._event_manager is None
                or not self._event_manager.has_subscribers(event_name)):
            raise InvalidArgumentException(
                'The method "%s()" is unsupported.' % name
            )

        if keyword_arguments:
            raise InvalidArgumentException(
                'The method "%s()" accepts positional arguments only, got: %s.'
                % (name, ', '.join(sorted(keyword_arguments)))
            )

        call_event = Event(None, {
            'arguments': list(arguments)
        })

        # Only the first subscriber answers
        call_event.set_stopped(True)

        self._event_manager.trigger(event_name, call_event)

        return call_event.get_data()

    def render(self) -> str:
        """
        Render the template, then the layout if one is set

        Raises:
            InvalidArgumentException: The template path is empty
        """
        if not self._template_path:
            raise InvalidArgumentException('Template file path is empty.')

        self._content = self._render_file(self._template_path)

        if self._layout_path:
            self._content = self._render_file(self._layout_path, {'content': self._content})

        return self._content

    def _render_file(self, file_path: str, extra: Optional[Dict[str, Any]] = None) -> str:
        logger.debug("Rendering view file %s", file_path)

        scope = {
            'variables': self._variables,
            'view': self,
        }
        scope.update(self._variables)
        scope.update(extra or {})

        return self._engine.render(file_path, scope) or ''

    def __str__(self) -> str:
        return self.render()

    def __repr__(self):
        return (
            f'View(template_path={self._template_path!r}, '
            f'layout_path={self._layout_path!r})'
        )
