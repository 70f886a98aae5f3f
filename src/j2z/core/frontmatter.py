"""YAML front-matter decoder and TOML front-matter encoder/assembler.

Jekyll front matter is read with PyYAML's safe loader, resolving plain
scalars by the YAML 1.2 core schema instead of YAML 1.1: ``date: 2023-05-01``
stays text until the converter parses it with the TOML grammar, and values
like ``10:30`` or ``yes`` stay text as well. Zola front matter is written
with tomli_w and wrapped in ``+++`` delimiters.
"""

from __future__ import annotations

import logging
import re
from typing import Any

import tomli_w
import yaml
from pydantic import ValidationError

from j2z.core.errors import EncodingFailure, FrontMatterInvalid
from j2z.core.schema import JekyllFront, ZolaFront

logger = logging.getLogger(__name__)

ZOLA_DELIMITER = "+++"


class _FrontMatterLoader(yaml.SafeLoader):
    pass


_BOOL = "tag:yaml.org,2002:bool"
_INT = "tag:yaml.org,2002:int"
_FLOAT = "tag:yaml.org,2002:float"
_REPLACED = {_BOOL, _INT, _FLOAT, "tag:yaml.org,2002:timestamp"}

# yaml_implicit_resolvers is shared with SafeLoader, so copy before filtering.
_FrontMatterLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag not in _REPLACED]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}

# YAML 1.2 core schema scalars: no yes/no/on/off booleans, no sexagesimal
# numbers, no timestamps. Numbers with leading zeros stay text. Int before
# float, first match wins.
_FrontMatterLoader.add_implicit_resolver(
    _BOOL,
    re.compile(r"^(?:true|True|TRUE|false|False|FALSE)$"),
    list("tTfF"),
)
_FrontMatterLoader.add_implicit_resolver(
    _INT,
    re.compile(r"^(?:[-+]?(?:0|[1-9][0-9]*)|0o[0-7]+|0x[0-9a-fA-F]+)$"),
    list("-+0123456789"),
)
_FrontMatterLoader.add_implicit_resolver(
    _FLOAT,
    re.compile(
        r"""^(?:[-+]?(?:\.[0-9]+|(?:0|[1-9][0-9]*)(?:\.[0-9]*)?)(?:[eE][-+]?[0-9]+)?
        |[-+]?\.(?:inf|Inf|INF)
        |\.(?:nan|NaN|NAN))$""",
        re.X,
    ),
    list("-+.0123456789"),
)


def load_yaml_block(text: str) -> dict[str, Any]:
    """Parse a front-matter block into a mapping."""
    try:
        data = yaml.load(text, Loader=_FrontMatterLoader)
    except yaml.YAMLError as e:
        raise FrontMatterInvalid(f"Front matter is not valid YAML: {e}") from e
    if not isinstance(data, dict):
        kind = "empty" if data is None else type(data).__name__
        raise FrontMatterInvalid(f"Front matter must be a mapping, got {kind}")
    return data


def decode_front(text: str) -> JekyllFront:
    data = load_yaml_block(text)
    try:
        front = JekyllFront.model_validate(data)
    except ValidationError as e:
        fields = ", ".join(".".join(str(p) for p in err["loc"]) or "<root>" for err in e.errors())
        raise FrontMatterInvalid(f"Front matter does not match the Jekyll schema ({fields})") from e
    logger.debug("Decoded front matter with %d extra keys", len(front.extra or {}))
    return front


def encode_front(front: ZolaFront) -> str:
    """Serialise Zola front matter to TOML, without delimiters."""
    doc = front.to_toml_dict()
    for key in sorted((front.extra or {}).keys() & {"title", "date", "description", "author"}):
        logger.warning("Dropping extra key %r: it collides with the named field", key)
    try:
        return tomli_w.dumps(doc)
    except (TypeError, ValueError) as e:
        raise EncodingFailure(f"Cannot encode front matter as TOML: {e}") from e


def assemble(encoded: str, content: str) -> str:
    return f"{ZOLA_DELIMITER}\n{encoded}\n{ZOLA_DELIMITER}\n{content}"
