from markupsafe import Markup, escape

from .status import StatusFlags

BADGE_CLASS = "ss-gridfield-badge badge"


def render_tag(tag: str, attributes: dict, content) -> Markup:
    """
    Build <tag attr="...">content</tag>.
    Attribute values and content are escaped unless already Markup.
    """
    attrs = "".join(
        Markup(' {}="{}"').format(name, value)
        for name, value in attributes.items()
        if value is not None
    )
    return Markup("<{0}{1}>{2}</{0}>").format(Markup(tag), Markup(attrs), escape(content))


def render_badges(flags: StatusFlags) -> Markup:
    """
    One <span> badge per flag, each preceded by a space.
    An empty mapping renders as an empty string.
    """
    content = Markup("")
    for name, data in flags.items():
        attributes = {"class": f"{BADGE_CLASS} status-{name}"}
        if data.get("title") is not None:
            attributes["title"] = data["title"]
        content += Markup(" ") + render_tag("span", attributes, data["text"])
    return content
