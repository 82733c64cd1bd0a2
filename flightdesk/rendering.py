"""
Template loading for the HTML pages.

Every template is compiled once at startup through the application's Jinja
environment, so a missing or broken page stops the server from starting
instead of failing on the first request.
"""

import logging
from typing import Iterable

from flask import Flask
from jinja2 import TemplateError

from flightdesk.errors import TemplateLoadError

logger = logging.getLogger(__name__)

REQUIRED_TEMPLATES = (
    'airports.html',
    'flights.html',
    'aircrafts.html',
    'results.html',
)


def load_templates(app: Flask, required: Iterable[str] = REQUIRED_TEMPLATES) -> int:
    """
    Compile and cache every template the app can see.

    Returns count of templates loaded.
    Raises TemplateLoadError if a required page is missing or any
    template fails to compile.
    """
    env = app.jinja_env
    names = [name for name in env.list_templates() if name.endswith('.html')]

    missing = sorted(set(required) - set(names))
    if missing:
        raise TemplateLoadError(f'Missing templates: {", ".join(missing)}')

    for name in names:
        try:
            env.get_template(name)
        except TemplateError as e:
            raise TemplateLoadError(f'Template {name} failed to load: {e}') from e

    logger.info(f'Loaded {len(names)} templates from {app.template_folder}')
    return len(names)
