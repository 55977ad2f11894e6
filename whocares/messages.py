"""Loading message sets from YAML files and filling in message templates."""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

import yaml

_HTML_ESCAPES = str.maketrans(
    {"&": "&amp;", "'": "&#39;", "<": "&lt;", ">": "&gt;", '"': "&#34;"}
)


class MessageLoadError(Exception):
    """A message set could not be read, parsed or validated."""


class Variant(str, Enum):
    DEFAULT = "default"
    CORPO = "corpo"
    SARCASTIC = "sarcastic"
    WHOLESOME = "wholesome"


@dataclass
class MessageSet:
    primary: list[str] = field(default_factory=list)
    secondary: list[str] = field(default_factory=list)
    footnotes: list[str] = field(default_factory=list)


def _read_first(directory: Path, names: list[str]):
    error = None
    for name in names:
        try:
            return (directory / name).read_bytes(), None
        except OSError as exc:
            error = exc
    return None, error


def _string_list(value, key: str, variant: str) -> list[str]:
    if value is None:
        return []
    if not isinstance(value, list):
        raise MessageLoadError(f"failed to parse messages for variant {variant!r}: {key} is not a list")
    items = []
    for item in value:
        if isinstance(item, (dict, list)):
            raise MessageLoadError(
                f"failed to parse messages for variant {variant!r}: {key} holds a non-scalar"
            )
        if item is None:
            items.append("")
        elif isinstance(item, bool):
            items.append("true" if item else "false")
        else:
            items.append(str(item))
    return items


class Messages:
    """Reads message variants from a directory, with an optional fallback directory."""

    def __init__(self, directory, fallback_dir=None) -> None:
        self.directory = Path(directory)
        self.fallback_dir = Path(fallback_dir) if fallback_dir is not None else None

    def load_variant(self, variant=Variant.DEFAULT) -> MessageSet:
        name = variant.value if isinstance(variant, Variant) else str(variant)
        names = [f"{name}.yml", f"{name}.yaml"]

        data, error = _read_first(self.directory, names)
        if data is None and self.fallback_dir is not None:
            data, error = _read_first(self.fallback_dir, names)
        if data is None:
            if name != Variant.DEFAULT.value:
                return self.load_variant(Variant.DEFAULT)
            raise MessageLoadError(f"failed to load messages for variant {name!r}: {error}") from error

        try:
            document = yaml.safe_load(data)
        except yaml.YAMLError as exc:
            raise MessageLoadError(f"failed to parse messages for variant {name!r}: {exc}") from exc
        if document is None:
            document = {}
        if not isinstance(document, dict):
            raise MessageLoadError(f"failed to parse messages for variant {name!r}: not a mapping")

        messages = MessageSet(
            primary=_string_list(document.get("primary"), "primary", name),
            secondary=_string_list(document.get("secondary"), "secondary", name),
            footnotes=_string_list(document.get("footnote"), "footnote", name),
        )
        if not (messages.primary and messages.secondary and messages.footnotes):
            raise MessageLoadError(f"invalid message set for variant {name!r}")
        return messages

    def render_message(self, template: str, variables: dict) -> str:
        """Replace each {{key}} with the HTML-escaped value."""
        result = template
        for key, value in variables.items():
            result = result.replace(f"{{{{{key}}}}}", str(value).translate(_HTML_ESCAPES))
        return result