"""
View Package
Views, template engines and the factory wiring them together
"""
from tinyview.view.engines import (
    TemplateEngine,
    PythonTemplateEngine,
    JinjaTemplateEngine,
    create_engine,
)
from tinyview.view.view import View, HelperProxy
from tinyview.view.factory import ViewFactory

__all__ = [
    # Core
    'View',
    'HelperProxy',
    'ViewFactory',

    # Engines
    'TemplateEngine',
    'PythonTemplateEngine',
    'JinjaTemplateEngine',
    'create_engine',
]
