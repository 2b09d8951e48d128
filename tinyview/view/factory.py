"""
View Factory
Builds views wired to a shared event manager, engine and helper set
"""
import os
from typing import Any, Callable, Dict, Optional

from tinyview.defaults import (
    DEFAULT_EVENT_PRIORITY,
    DEFAULT_VIEW_ENCODING,
    DEFAULT_VIEW_ENGINE,
    DEFAULT_VIEW_LAYOUT,
    DEFAULT_VIEW_TEMPLATE_DIR,
)
from tinyview.events import Event, EventManager
from tinyview.logging import getLogger
from tinyview.support import Config
from tinyview.view.engines import TemplateEngine, create_engine
from tinyview.view.view import View

logger = getLogger(__name__)

# Marks "use the factory's default layout" in make()
_DEFAULT = object()


class ViewFactory:
    """
    Creates views for an application

    Values not passed in are read from config/view.py:
        TEMPLATE_DIR  directory relative template paths are resolved against
        ENGINE        'python' or 'jinja'
        ENCODING      template file encoding
        LAYOUT        layout applied to every view unless make() overrides it

    Example:
        factory = ViewFactory(template_dir='templates', layout_path='layout.py')
        factory.add_helper('upper', lambda text: text.upper())
        html = factory.make('home.py', {'title': 'Home'}).render()
    """

    def __init__(
        self,
        event_manager: Optional[EventManager] = None,
        engine: Optional[TemplateEngine] = None,
        template_dir: Optional[str] = None,
        layout_path: Optional[str] = None
    ):
        self.event_manager = event_manager or EventManager()

        if engine is None:
            engine = create_engine(
                Config.get('view.ENGINE', DEFAULT_VIEW_ENGINE),
                encoding=Config.get('view.ENCODING', DEFAULT_VIEW_ENCODING)
            )
        self.engine = engine

        if template_dir is None:
            template_dir = Config.get('view.TEMPLATE_DIR', DEFAULT_VIEW_TEMPLATE_DIR)
        self.template_dir = template_dir

        if layout_path is None:
            layout_path = Config.get('view.LAYOUT', DEFAULT_VIEW_LAYOUT)
        self.layout_path = layout_path

    def add_helper(
        self,
        name: str,
        callback: Callable[..., Any],
        priority: int = DEFAULT_EVENT_PRIORITY
    ) -> 'ViewFactory':
        """
        Register a view helper

        The helper receives the call arguments and its return value
        becomes the result of view.call_helper(name, ...).
        """
        def listener(event: Event):
            arguments = event.get_data().get('arguments', [])
            event.set_data(callback(*arguments))

        self.event_manager.subscribe(
            View.EVENT_CALL_VIEW_HELPER + name,
            listener,
            priority
        )
        logger.debug("Registered view helper %s", name)

        return self

    def add_helpers(self, helpers: Dict[str, Callable[..., Any]]) -> 'ViewFactory':
        for name, callback in helpers.items():
            self.add_helper(name, callback)
        return self

    def has_helper(self, name: str) -> bool:
        return self.event_manager.has_subscribers(View.EVENT_CALL_VIEW_HELPER + name)

    def resolve_path(self, path: Optional[str]) -> Optional[str]:
        """Resolve a template path against the template directory"""
        if not path or not self.template_dir or os.path.isabs(path):
            return path
        return os.path.join(self.template_dir, path)

    def make(
        self,
        template: Optional[str] = None,
        variables: Optional[Dict[str, Any]] = None,
        layout: Any = _DEFAULT
    ) -> View:
        """
        Create a view

        Args:
            template: Template path, relative to the template directory
            variables: View variables
            layout: Layout path; omit for the default layout, None for no layout

        Returns:
            View wired to this factory's event manager and engine
        """
        if layout is _DEFAULT:
            layout = self.layout_path

        view = View(
            variables or {},
            self.resolve_path(template),
            self.resolve_path(layout),
            engine=self.engine
        )
        view.set_event_manager(self.event_manager)

        return view
