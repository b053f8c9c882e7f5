# topmark:header:start
#
#   project      : Lice
#   file         : render.py
#   file_relpath : src/lice/licenses/render.py
#   license      : MIT
#   copyright    : (c) 2025 The Lice Authors
#
# topmark:header:end

"""Render license templates into normalized text.

License texts are Jinja2 templates evaluated in a sandbox with strict undefined
handling. The template namespace is built from a `RenderContext`:

- ``author``: the copyright holder. It has no default: a template that uses it
  while the context author is unknown fails to render.
- ``project``: the project name, or None, so ``{% if project %}`` blocks are
  skipped when it is not set.
- ``date(layout)`` / ``time(layout)``: format the context time with an
  ``strftime`` layout, e.g. ``{{ date("%Y") }}`` for a copyright year.

Rendering happens in memory; the output is normalized (see
`lice.text.block.normalize`) before any comment wrapping.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from jinja2 import StrictUndefined, TemplateSyntaxError, UndefinedError
from jinja2.exceptions import SecurityError
from jinja2.sandbox import SandboxedEnvironment

from lice.config.logging import get_logger
from lice.errors import TemplateError
from lice.text.block import normalize

if TYPE_CHECKING:
    from lice.config.logging import LiceLogger
    from lice.licenses.model import LicenseEntry, RenderContext
    from lice.text.block import TextBlock
    from lice.text.indent import IndentRule

logger: LiceLogger = get_logger(__name__)


def _make_environment() -> SandboxedEnvironment:
    env = SandboxedEnvironment(
        undefined=StrictUndefined,
        autoescape=False,
        trim_blocks=True,
        keep_trailing_newline=True,
    )
    # Only the names provided by the render context are visible to templates.
    env.globals = {}
    return env


_ENV: SandboxedEnvironment = _make_environment()


def template_namespace(context: RenderContext) -> dict[str, Any]:
    """Return the variables and functions visible to license templates.

    Args:
        context (RenderContext): The render context.

    Returns:
        dict[str, Any]: Template namespace; ``author`` is omitted when unknown.
    """
    namespace: dict[str, Any] = {
        "project": context.project,
        "date": context.time.strftime,
        "time": context.time.strftime,
    }
    if context.author is not None:
        namespace["author"] = context.author
    return namespace


def render_template(text: str, context: RenderContext, *, slug: str = "") -> str:
    """Render template ``text`` with ``context``.

    Args:
        text (str): Template source.
        context (RenderContext): Values to substitute.
        slug (str): License slug, used in error messages.

    Returns:
        str: The rendered text.

    Raises:
        TemplateError: If the template is malformed or references a name the
            context does not provide.
    """
    try:
        template = _ENV.from_string(text)
    except TemplateSyntaxError as exc:
        raise TemplateError(slug, f"parsing template: line {exc.lineno}: {exc.message}") from exc
    try:
        return template.render(template_namespace(context))
    except UndefinedError as exc:
        raise TemplateError(slug, f"rendering template: {exc.message}") from exc
    except (SecurityError, TypeError, ValueError) as exc:
        raise TemplateError(slug, f"rendering template: {exc}") from exc


def render_block(text: str, context: RenderContext, *, slug: str = "") -> TextBlock:
    """Render template ``text`` and return it as a normalized block."""
    return normalize(render_template(text, context, slug=slug))


def render_body(entry: LicenseEntry, context: RenderContext) -> str:
    """Render the full license text of ``entry``.

    The result ends with exactly one newline.

    Args:
        entry (LicenseEntry): The license to render.
        context (RenderContext): Values to substitute.

    Returns:
        str: The license text.

    Raises:
        TemplateError: If the license template cannot be rendered.
    """
    logger.debug("rendering license text for %s", entry.slug)
    block = render_block(entry.text, context, slug=entry.slug)
    return block.render() + "\n"


def render_per_file(
    entry: LicenseEntry,
    context: RenderContext,
    rule: IndentRule | None = None,
) -> str | None:
    """Render the per-file notice of ``entry`` wrapped for a target file.

    The notice is followed by one blank line separating it from the file's
    original content.

    Args:
        entry (LicenseEntry): The license whose notice to render.
        context (RenderContext): Values to substitute.
        rule (IndentRule | None): Indenting rule; None inserts the text verbatim.

    Returns:
        str | None: The notice text, or None if the license has no per-file
        notice or the notice renders to nothing.

    Raises:
        TemplateError: If the notice template cannot be rendered.
    """
    if not entry.per_file:
        return None
    logger.debug("rendering per-file notice for %s", entry.slug)
    block = render_block(entry.per_file, context, slug=entry.slug)
    if not block.lines:
        logger.debug("per-file notice for %s is empty", entry.slug)
        return None
    if rule is not None:
        block = rule.apply(block)
    return block.append("", "").render()
