"""Fixed registry of the bundled project templates."""

from dataclasses import dataclass
from pathlib import Path

from create_simple_express.scaffold.errors import TemplateNotFoundError, UnknownTemplateError


@dataclass(frozen=True)
class Template:
    """A selectable project template.

    Attributes:
        id: Short identifier, also the payload directory name
        label: Text shown when choosing a template
        accent: Rich color used to render the label
    """

    id: str
    label: str
    accent: str


# Display order
TEMPLATES: tuple[Template, ...] = (
    Template(id="basic", label="Great for absolute beginners", accent="green"),
    Template(id="api", label="For building real-world APIs", accent="yellow"),
)


def list_templates() -> tuple[Template, ...]:
    return TEMPLATES


def template_ids() -> tuple[str, ...]:
    return tuple(template.id for template in TEMPLATES)


def is_known(template_id: str | None) -> bool:
    return template_id in template_ids()


def get_template(template_id: str) -> Template:
    """Look up a template by id.

    Raises:
        UnknownTemplateError: If the id is not in the catalog
    """
    for template in TEMPLATES:
        if template.id == template_id:
            return template
    raise UnknownTemplateError(
        f"Template '{template_id}' not found. Available templates: {', '.join(template_ids())}"
    )


def _get_payload_root() -> Path:
    """Get path to the bundled template payloads.

    Uses the installed ``create_simple_express.templates`` package, falling
    back to the source tree during development.
    """
    try:
        import create_simple_express.templates

        payload_root = Path(create_simple_express.templates.__file__).parent
        if payload_root.exists():
            return payload_root
    except (ImportError, AttributeError, TypeError):
        pass

    return Path(__file__).parent.parent / "templates"


def template_root(template_id: str) -> Path:
    """Directory holding the files of a catalogued template.

    Raises:
        UnknownTemplateError: If the id is not in the catalog
        TemplateNotFoundError: If the payload directory is missing
    """
    template = get_template(template_id)
    root = _get_payload_root() / template.id
    if not root.is_dir():
        raise TemplateNotFoundError(
            f"Could not locate files for template '{template.id}' at {root}. "
            "Ensure create-simple-express is properly installed."
        )
    return root
