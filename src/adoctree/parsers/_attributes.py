#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/adoctree/parsers/_attributes.py
"""Document attributes and block attribute lists.

This module covers three small grammars:

- attribute entries (``:name: value`` sets, ``:name!:`` and ``:!name:`` unset)
- attribute references (``{name}``), substituted before inline tokenization
- bracketed attribute lists (``[source,python%linenums]``,
  ``[cols="<,^,>",options="header"]``) and image macro attributes
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Optional

from adoctree.constants import BUILTIN_ATTRIBUTES, AttributeMissingPolicy
from adoctree.utils.text import split_respecting_quotes, strip_quotes

logger = logging.getLogger(__name__)

_NAME = r"[A-Za-z0-9_][A-Za-z0-9_-]*"

ATTRIBUTE_ENTRY_PATTERN = re.compile(rf"^:(?P<bang1>!)?(?P<name>{_NAME})(?P<bang2>!)?:(?:\s+(?P<value>.*?))?\s*$")
ATTRIBUTE_REFERENCE_PATTERN = re.compile(rf"(?P<escape>\\)?\{{(?P<name>{_NAME})\}}")
BLOCK_ATTRIBUTE_LINE_PATTERN = re.compile(r"^\[(?P<body>[^\[\]]*)\]$")
_NAMED_ATTRIBUTE_PATTERN = re.compile(r"^(?P<key>[A-Za-z0-9_-]+)\s*=\s*(?P<value>.*)$", re.DOTALL)
_SHORTHAND_START = re.compile(r"[#.%]")
_SHORTHAND_PATTERN = re.compile(r"([#.%])([^#.%]*)")


def new_attribute_table(initial: Optional[Mapping[str, str]] = None) -> dict[str, str]:
    """Create an attribute table seeded with the built-in attributes.

    Parameters
    ----------
    initial : Mapping of str to str, optional
        Attributes applied on top of the built-ins (e.g. from the command line)

    Returns
    -------
    dict of str to str
        A fresh, independently mutable table

    """
    table = dict(BUILTIN_ATTRIBUTES)
    if initial:
        table.update({str(name): str(value) for name, value in initial.items()})
    return table


def substitute_attributes(
    text: str,
    attributes: Mapping[str, str],
    missing_policy: AttributeMissingPolicy = "keep",
) -> str:
    """Replace ``{name}`` references with values from ``attributes``.

    Substitution is a single left-to-right pass: replacement values are not
    scanned again. ``\\{name}`` yields the literal ``{name}``.

    Parameters
    ----------
    text : str
        Raw text
    attributes : Mapping of str to str
        Live attribute table
    missing_policy : {"keep", "blank", "warn"}, default "keep"
        Treatment of undefined names; "keep" and "warn" leave the reference
        literal, "blank" removes it

    Returns
    -------
    str
        Text with references replaced

    Examples
    --------
    >>> substitute_attributes("{product} for {cpp}", {"product": "adoctree", "cpp": "C++"})
    'adoctree for C++'
    >>> substitute_attributes("{unknown}", {})
    '{unknown}'

    """
    if "{" not in text:
        return text

    def replace(match: re.Match[str]) -> str:
        name = match.group("name")
        if match.group("escape"):
            return "{" + name + "}"
        if name in attributes:
            return attributes[name]
        if missing_policy == "blank":
            return ""
        if missing_policy == "warn":
            logger.warning("Undefined attribute reference: {%s}", name)
        return match.group(0)

    return ATTRIBUTE_REFERENCE_PATTERN.sub(replace, text)


def match_attribute_entry(line: str) -> Optional[tuple[str, Optional[str]]]:
    """Recognise an attribute entry line.

    Returns
    -------
    tuple of (str, str or None) or None
        ``(name, value)`` for ``:name: value``, ``(name, None)`` for an unset
        entry, or None when the line is not an attribute entry

    """
    match = ATTRIBUTE_ENTRY_PATTERN.match(line.rstrip())
    if not match:
        return None
    name = match.group("name")
    if match.group("bang1") or match.group("bang2"):
        return name, None
    return name, match.group("value") or ""


def apply_attribute_entry(
    attributes: dict[str, str],
    name: str,
    value: Optional[str],
    missing_policy: AttributeMissingPolicy = "keep",
) -> None:
    """Set or unset ``name`` in the live table.

    Values are substituted against the table before being stored, so an
    entry captures the current value of the attributes it references.
    """
    if value is None:
        attributes.pop(name, None)
        return
    attributes[name] = substitute_attributes(value, attributes, missing_policy)


@dataclass
class BlockAttributes:
    """Parsed content of a bracketed block attribute line.

    Parameters
    ----------
    positional : list of str
        Bare values in order (the first has any shorthand removed)
    named : dict of str to str
        ``key=value`` pairs with surrounding quotes stripped
    options : list of str
        ``%option`` shorthands plus entries of an ``options``/``opts`` value
    id : str or None
        ``#id`` shorthand
    roles : list of str
        ``.role`` shorthands

    """

    positional: list[str] = field(default_factory=list)
    named: dict[str, str] = field(default_factory=dict)
    options: list[str] = field(default_factory=list)
    id: Optional[str] = None
    roles: list[str] = field(default_factory=list)

    @property
    def style(self) -> str:
        """First positional value, or empty string."""
        return self.positional[0] if self.positional else ""

    def to_attribute_map(self) -> dict[str, str]:
        """Flatten into a node attribute dict.

        Named values are kept, options are folded into a comma separated
        ``options`` value, and id/roles become ``id``/``role``.
        """
        result = dict(self.named)
        if self.options:
            result["options"] = ",".join(self.options)
        if self.id:
            result["id"] = self.id
        if self.roles:
            result["role"] = " ".join(self.roles)
        return result


def _add_options(target: list[str], value: str) -> None:
    for option in value.split(","):
        option = option.strip()
        if option and option not in target:
            target.append(option)


def parse_block_attributes(body: str) -> BlockAttributes:
    """Parse the inside of a ``[...]`` block attribute line.

    Parameters
    ----------
    body : str
        Text between the brackets

    Returns
    -------
    BlockAttributes
        Parsed positional, named and shorthand values

    Examples
    --------
    >>> attrs = parse_block_attributes("source,python%linenums")
    >>> attrs.positional, attrs.options
    (['source', 'python'], ['linenums'])
    >>> parse_block_attributes('cols="<,^,>",%header').to_attribute_map()
    {'cols': '<,^,>', 'options': 'header'}

    """
    result = BlockAttributes()
    if not body.strip():
        return result

    for index, raw_token in enumerate(split_respecting_quotes(body)):
        token = raw_token.strip()
        named = _NAMED_ATTRIBUTE_PATTERN.match(token)
        if named and not token.startswith(("\"", "'")):
            key = named.group("key")
            value = strip_quotes(named.group("value"))
            if key in ("options", "opts"):
                _add_options(result.options, value)
            else:
                result.named[key] = value
            continue

        if token[:1] in ("\"", "'"):
            result.positional.append(strip_quotes(token))
            continue

        if index == 0:
            # style#id.role%option
            first_marker = _SHORTHAND_START.search(token)
            value_end = first_marker.start() if first_marker else len(token)
            if value_end > 0 or not first_marker:
                result.positional.append(token[:value_end])
            for marker, name in _SHORTHAND_PATTERN.findall(token[value_end:]):
                if not name:
                    continue
                if marker == "#":
                    result.id = name
                elif marker == ".":
                    result.roles.append(name)
                else:
                    _add_options(result.options, name)
            continue

        # value%option%option
        value, *options = token.split("%")
        if value or not options:
            result.positional.append(value)
        for option in options:
            _add_options(result.options, option)

    return result


def parse_block_attribute_line(line: str) -> Optional[BlockAttributes]:
    """Parse ``line`` if it is a standalone ``[...]`` block attribute line."""
    match = BLOCK_ATTRIBUTE_LINE_PATTERN.match(line.strip())
    if not match:
        return None
    return parse_block_attributes(match.group("body"))


def is_block_attribute_line(line: str) -> bool:
    """Return True for a standalone ``[...]`` line."""
    return BLOCK_ATTRIBUTE_LINE_PATTERN.match(line.strip()) is not None


def parse_macro_attributes(body: str) -> tuple[str, dict[str, str]]:
    """Parse image macro attributes ``alt, width, height, key=value, ...``.

    The first bare value is the alt text; the second and third bare values
    are the width and height, unless given by name.

    >>> parse_macro_attributes("Logo, width=200, height=100")
    ('Logo', {'width': '200', 'height': '100'})

    """
    alt_text = ""
    attributes: dict[str, str] = {}
    bare_values: list[str] = []
    if not body.strip():
        return alt_text, attributes

    for raw_token in split_respecting_quotes(body):
        token = raw_token.strip()
        named = _NAMED_ATTRIBUTE_PATTERN.match(token)
        if named and not token.startswith(("\"", "'")):
            attributes[named.group("key")] = strip_quotes(named.group("value"))
        else:
            bare_values.append(strip_quotes(token))

    if bare_values:
        alt_text = bare_values[0]
    for key, value in zip(("width", "height"), bare_values[1:3]):
        if value:
            attributes.setdefault(key, value)
    if len(bare_values) > 3:
        logger.debug("Ignoring extra positional image attributes: %s", bare_values[3:])
    return alt_text, attributes
