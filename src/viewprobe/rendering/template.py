# src/viewprobe/rendering/template.py
import logging
from typing import Any, Dict, Optional

from bs4 import BeautifulSoup
from jinja2 import Environment, FileSystemLoader, StrictUndefined, TemplateError, TemplateNotFound, TemplateRuntimeError, pass_context
from markupsafe import Markup
from pydantic import BaseModel

from .rendered_view import RenderedView
from ..dom.keys import PARTIAL_TAG
from ..exceptions import TemplateRenderException, ViewNotFoundException
from ..model import RenderConfiguration
from ..core.utils.path_utils import PathUtils

logger = logging.getLogger(__name__)

# Names the view context provides itself; a model field may not take them
RESERVED_NAMES = ("partial", "model")


@pass_context
def _partial(context, name: str, **extra: Any) -> Markup:
    """
    Renders a sub-template with the calling view's context and wraps it in a
    <partial name="..."> element so the inclusion point can be queried.
    """
    clashes = [key for key in RESERVED_NAMES if key in extra]
    if clashes:
        raise TemplateRuntimeError(f"partial() argument(s) {', '.join(clashes)} clash with reserved view names")
    template = context.environment.get_template(name)
    inner = template.render({**context.get_all(), **extra})
    return Markup('<{tag} name="{name}">{inner}</{tag}>').format(
        tag=Markup(PARTIAL_TAG), name=name, inner=Markup(inner)
    )


def _model_context(model: Any) -> Dict[str, Any]:
    """
    Exposes the model's fields as top-level names and the model itself as 'model'.
    Raises ValueError for a field that would shadow a reserved name.
    """
    if model is None:
        fields: Dict[str, Any] = {}
    elif isinstance(model, dict):
        fields = dict(model)
    elif isinstance(model, BaseModel):
        fields = dict(model)
    elif hasattr(model, "__dict__"):
        fields = vars(model).copy()
    else:
        raise TypeError(f"Unsupported view model type: {type(model).__name__}")
    clashes = [name for name in RESERVED_NAMES if name in fields]
    if clashes:
        raise ValueError(f"Model field(s) {', '.join(clashes)} clash with reserved view names")
    return {**fields, "model": model}


class Template:
    """
    Entry point: renders a view with Jinja2, parses it with BeautifulSoup and
    hands back a RenderedView ready for querying.
    """

    @staticmethod
    def build_environment(configuration: RenderConfiguration) -> Environment:
        if configuration.view_folder_location is None:
            raise ValueError("RenderConfiguration.view_folder_location is required to render a view.")
        folder = PathUtils.resolve_view_folder(configuration.view_folder_location)
        env = Environment(
            loader=FileSystemLoader(str(folder)),
            autoescape=configuration.autoescape,
            undefined=StrictUndefined,
        )
        env.globals["partial"] = _partial
        return env

    @staticmethod
    def render(view_name: str, configuration: RenderConfiguration, model: Any = None) -> RenderedView:
        """
        Renders `view_name` from the configured view folder.

        Args:
            view_name (str): File name of the view, relative to the view folder.
            configuration (RenderConfiguration): Where to find views and how to index them.
            model (Any): dict, pydantic model or plain object supplying the view's data.

        Returns:
            RenderedView: The indexed result.

        Raises:
            ViewNotFoundException: If the view or one of its partials does not exist.
            TemplateRenderException: If Jinja2 fails while rendering, or the model
                is unsupported or uses a reserved name ('partial', 'model').
        """
        env = Template.build_environment(configuration)
        try:
            context = _model_context(model)
        except (TypeError, ValueError) as e:
            logger.error("Rendering '%s' failed: %s", view_name, e)
            raise TemplateRenderException(view_name, str(e)) from e

        try:
            markup = env.get_template(view_name).render(context)
        except TemplateNotFound as e:
            logger.error("View '%s' not found in %s", e.name, configuration.view_folder_location)
            raise ViewNotFoundException(str(e.name), str(configuration.view_folder_location)) from e
        except TemplateError as e:
            logger.error("Rendering '%s' failed: %s", view_name, e)
            raise TemplateRenderException(view_name, str(e)) from e

        logger.debug("Rendered '%s' (%d chars)", view_name, len(markup))
        return Template.from_markup(markup, configuration)

    @staticmethod
    def from_markup(markup: str, configuration: Optional[RenderConfiguration] = None) -> RenderedView:
        """Indexes an already rendered markup string."""
        configuration = configuration or RenderConfiguration()
        # Basic cleanup of potentially dirty markup (e.g., BOM)
        clean_markup = (markup or "").replace('\ufeff', '')
        soup = BeautifulSoup(
            clean_markup,
            configuration.parser_features,
            multi_valued_attributes=None,
        )
        return RenderedView(clean_markup, soup, configuration.test_id_attribute)
