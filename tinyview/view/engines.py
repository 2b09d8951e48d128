"""
Template Engines
Pluggable evaluators turning a template file and a scope into text
"""
import io
import os
from abc import ABC, abstractmethod
from typing import Any, Dict, Type

from jinja2 import Environment, FileSystemLoader

from tinyview.defaults import DEFAULT_VIEW_ENCODING
from tinyview.exceptions import InvalidArgumentException
from tinyview.logging import getLogger

logger = getLogger(__name__)


class TemplateEngine(ABC):
    """Evaluates one template file with the given names in scope"""

    @abstractmethod
    def render(self, file_path: str, scope: Dict[str, Any]) -> str:
        """
        Render a template file

        Args:
            file_path: Path of the template file
            scope: Names visible to the template

        Returns:
            Everything the template wrote, '' if it wrote nothing
        """


class PythonTemplateEngine(TemplateEngine):
    """
    Templates are plain Python scripts; whatever they print is the output

    The script runs with the scope as its globals. `print` and `echo`
    are bound to a capture buffer owned by the render call, so renders
    running in parallel threads never mix their output.

    Example template (page.py):
        print(f"<h1>{title}</h1>")
        echo(view.helpers.url('home'))
    """

    def __init__(self, encoding: str = DEFAULT_VIEW_ENCODING):
        self.encoding = encoding

    def render(self, file_path: str, scope: Dict[str, Any]) -> str:
        with open(file_path, 'r', encoding=self.encoding) as f:
            source = f.read()

        # Editors may save UTF-8 with a byte order mark, which compile() rejects
        if source.startswith('\ufeff'):
            source = source[1:]

        code = compile(source, file_path, 'exec')

        with io.StringIO() as buffer:
            def template_print(*values, sep=' ', end='\n', file=None, flush=False):
                print(*values, sep=sep, end=end, file=file or buffer, flush=flush)

            def echo(*values):
                buffer.write(''.join(str(value) for value in values))

            template_globals = dict(scope)
            template_globals.update({
                '__name__': '__template__',
                '__file__': file_path,
                'print': template_print,
                'echo': echo,
            })

            exec(code, template_globals)

            return buffer.getvalue()


class JinjaTemplateEngine(TemplateEngine):
    """
    Jinja2 templates, loaded relative to the directory of the rendered file
    so that {% extends %} and {% include %} find their siblings
    """

    def __init__(self, encoding: str = DEFAULT_VIEW_ENCODING, autoescape: bool = False):
        self.encoding = encoding
        self.autoescape = autoescape

    def render(self, file_path: str, scope: Dict[str, Any]) -> str:
        directory, file_name = os.path.split(os.path.abspath(file_path))

        environment = Environment(
            loader=FileSystemLoader(directory, encoding=self.encoding),
            autoescape=self.autoescape,
            keep_trailing_newline=True,
        )

        return environment.get_template(file_name).render(scope)


ENGINES: Dict[str, Type[TemplateEngine]] = {
    'python': PythonTemplateEngine,
    'jinja': JinjaTemplateEngine,
}


def create_engine(name: str, **options) -> TemplateEngine:
    """
    Build a template engine by name

    Example:
        engine = create_engine('jinja', autoescape=True)
    """
    engine_class = ENGINES.get(name.lower()) if name else None

    if engine_class is None:
        raise InvalidArgumentException(
            'The template engine "%s" is unsupported.' % name
        )

    logger.debug("Creating %s template engine", name)
    return engine_class(**options)
