#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdxdoc/components/catalogue.py
"""Registry of the components the editor understands.

Every supported component tag has one :class:`ComponentRule`: the document
node type it becomes, how its attributes map onto document attributes and
what happens to its children. The registry is built once at import time and
exposed read-only through :data:`CATALOGUE`.

Child Policies
--------------
pass-through
    Children are converted normally and become the node content.
extract-named-children
    Only children named ``child_component`` are kept; each is converted with
    its own rule (``Tabs`` keeps its ``Tab`` children).
flatten-markdown-table
    The ``data`` attribute is flattened into table columns and rows.
atomic
    The node has no content; everything lives in attrs.

"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional

from mdxdoc.components.attributes import AttributeSpec
from mdxdoc.constants import (
    CALLOUT_TYPES,
    DEFAULT_ACCORDION_HEADER,
    DEFAULT_CARD_ICON_ALIGN,
    DEFAULT_COLUMN_COUNT,
    DEFAULT_COLUMN_WIDTH,
    DEFAULT_ENDPOINT_METHOD,
    DEFAULT_ENDPOINT_PATH,
    DEFAULT_IMAGE_TYPE,
    DEFAULT_LABEL_COLOR,
    DEFAULT_LABEL_SIZE,
    DEFAULT_PARAM_PATH,
    DEFAULT_PARAM_TYPE,
    DEFAULT_STEP_TITLE,
    DEFAULT_TAB_LABEL,
    DEFAULT_TABLE_ROWS_PER_PAGE,
    DEFAULT_TABLE_ROWS_PER_PAGE_OPTIONS,
    DEFAULT_TABLE_SCROLL_HEIGHT,
    DEFAULT_TABS_ALIGNMENT,
)


class ChildPolicy(str, Enum):
    """What a component does with its children."""

    PASS_THROUGH = "pass-through"
    EXTRACT_NAMED_CHILDREN = "extract-named-children"
    FLATTEN_MARKDOWN_TABLE = "flatten-markdown-table"
    ATOMIC = "atomic"


@dataclass(frozen=True)
class ComponentRule:
    """Conversion rule for one component name.

    Parameters
    ----------
    component_name : str
        Tag name as written in source
    target_kind : str or None
        Document node type produced; None for children that only feed their
        parent's attrs (``Code`` inside ``CodeGroup``)
    attribute_map : tuple of AttributeSpec
        Attribute mapping, in the order attrs are written
    child_policy : ChildPolicy
        Handling of the children
    child_component : str or None
        Name of the children kept by ``extract-named-children``
    standalone : bool
        False for names that are only meaningful inside their parent; such
        tags produce nothing when found elsewhere
    id_prefix : str or None
        Prefix of the generated ``id`` attribute, when the editor tracks it

    """

    component_name: str
    target_kind: Optional[str]
    attribute_map: tuple[AttributeSpec, ...] = ()
    child_policy: ChildPolicy = ChildPolicy.PASS_THROUGH
    child_component: Optional[str] = None
    standalone: bool = True
    id_prefix: Optional[str] = None

    @property
    def is_block(self) -> bool:
        """Return True when the component produces a block node on its own."""
        return self.standalone and self.target_kind is not None


_CARD_ATTRS = (
    AttributeSpec("title", "title", ""),
    AttributeSpec("icon", "icon", ""),
    AttributeSpec("iconAlign", "iconAlign", DEFAULT_CARD_ICON_ALIGN),
    AttributeSpec("href", "href", ""),
)

_TABLE_ATTRS = (
    AttributeSpec("scrollable", "scrollable", False, kind="bool"),
    AttributeSpec("scrollHeight", "scrollHeight", DEFAULT_TABLE_SCROLL_HEIGHT, kind="int"),
    AttributeSpec("pagination", "pagination", False, kind="bool"),
    AttributeSpec("rowsPerPage", "rowsPerPage", DEFAULT_TABLE_ROWS_PER_PAGE, kind="int"),
    AttributeSpec("rowsPerPageOptions", "rowsPerPageOptions", DEFAULT_TABLE_ROWS_PER_PAGE_OPTIONS, kind="list"),
)


def _callout_rule(name: str) -> ComponentRule:
    return ComponentRule(
        name,
        "infoBlock",
        (
            AttributeSpec("type", None, name.lower()),
            AttributeSpec("title", "title", ""),
        ),
        id_prefix="info",
    )


_RULES: tuple[ComponentRule, ...] = (
    ComponentRule("Card", "cardBlock", _CARD_ATTRS, id_prefix="card"),
    *(_callout_rule(callout.capitalize()) for callout in CALLOUT_TYPES),
    ComponentRule("RightPanel", "rightPanel", id_prefix="rightpanel"),
    ComponentRule(
        "CodeGroup",
        "codeGroup",
        child_policy=ChildPolicy.EXTRACT_NAMED_CHILDREN,
        child_component="Code",
    ),
    ComponentRule(
        "Code",
        None,
        (
            AttributeSpec("language", "lang", None, aliases=("language",), kind="optional-string"),
            AttributeSpec("filename", "filename", None, kind="optional-string"),
        ),
        standalone=False,
    ),
    ComponentRule(
        "Columns",
        "columnGroup",
        (AttributeSpec("columnCount", "columns", DEFAULT_COLUMN_COUNT, aliases=("columnCount",), kind="int"),),
        child_policy=ChildPolicy.EXTRACT_NAMED_CHILDREN,
        child_component="Column",
    ),
    ComponentRule(
        "ColumnGroup",
        "columnGroup",
        (AttributeSpec("columnCount", "columns", DEFAULT_COLUMN_COUNT, aliases=("columnCount",), kind="int"),),
        child_policy=ChildPolicy.EXTRACT_NAMED_CHILDREN,
        child_component="Column",
    ),
    ComponentRule(
        "Column",
        "column",
        (AttributeSpec("width", "width", DEFAULT_COLUMN_WIDTH),),
        standalone=False,
    ),
    ComponentRule(
        "Accordion",
        "accordionBlock",
        (AttributeSpec("multiple", "multiple", True, kind="bool"),),
        child_policy=ChildPolicy.EXTRACT_NAMED_CHILDREN,
        child_component="AccordionTab",
        id_prefix="accordion",
    ),
    ComponentRule(
        "AccordionTab",
        "accordionTab",
        (
            AttributeSpec("header", "title", DEFAULT_ACCORDION_HEADER, aliases=("header",)),
            AttributeSpec("disabled", "disabled", False, kind="bool"),
            AttributeSpec("isActive", "isActive", False, kind="bool"),
        ),
        standalone=False,
    ),
    ComponentRule(
        "Tabs",
        "tabsBlock",
        (AttributeSpec("alignment", "alignment", DEFAULT_TABS_ALIGNMENT),),
        child_policy=ChildPolicy.EXTRACT_NAMED_CHILDREN,
        child_component="Tab",
        id_prefix="tabs",
    ),
    ComponentRule(
        "Tab",
        "tabBlock",
        (
            AttributeSpec("label", "title", DEFAULT_TAB_LABEL, aliases=("label",)),
            AttributeSpec("icon", "icon", None, kind="optional-string"),
            AttributeSpec("isActive", None, False),
        ),
        standalone=False,
    ),
    ComponentRule(
        "Steps",
        "stepsBlock",
        child_policy=ChildPolicy.EXTRACT_NAMED_CHILDREN,
        child_component="Step",
        id_prefix="steps",
    ),
    ComponentRule(
        "Step",
        "stepBlock",
        (AttributeSpec("title", "title", DEFAULT_STEP_TITLE),),
        standalone=False,
    ),
    ComponentRule(
        "CheckList",
        "taskList",
        child_policy=ChildPolicy.EXTRACT_NAMED_CHILDREN,
        child_component="CheckItem",
    ),
    ComponentRule(
        "CheckItem",
        "taskItem",
        (AttributeSpec("variant", "variant", None, kind="optional-string"),),
        standalone=False,
    ),
    ComponentRule("Table", "tableBlock", _TABLE_ATTRS, child_policy=ChildPolicy.FLATTEN_MARKDOWN_TABLE),
    ComponentRule(
        "Endpoint",
        "endpointBlock",
        (
            AttributeSpec("method", "method", DEFAULT_ENDPOINT_METHOD),
            AttributeSpec("path", "path", DEFAULT_ENDPOINT_PATH),
        ),
        child_policy=ChildPolicy.ATOMIC,
        id_prefix="endpoint",
    ),
    ComponentRule(
        "Label",
        "labelBlock",
        (
            AttributeSpec("label", "label", None, kind="optional-string"),
            AttributeSpec("color", "color", DEFAULT_LABEL_COLOR),
            AttributeSpec("size", "size", DEFAULT_LABEL_SIZE),
        ),
        child_policy=ChildPolicy.ATOMIC,
        id_prefix="label",
    ),
    ComponentRule(
        "ParamField",
        "paramBlock",
        (
            AttributeSpec("path", "path", DEFAULT_PARAM_PATH, aliases=("name",)),
            AttributeSpec("type", "type", DEFAULT_PARAM_TYPE),
            AttributeSpec("required", "required", False, kind="bool"),
            AttributeSpec("default", "default", ""),
            AttributeSpec("description", "description", None, kind="optional-string"),
        ),
        child_policy=ChildPolicy.ATOMIC,
        id_prefix="param",
    ),
    ComponentRule(
        "img",
        "imageBlock",
        (
            AttributeSpec("src", "src", ""),
            AttributeSpec("alt", "alt", None, kind="optional-string"),
            AttributeSpec("caption", "title", "", aliases=("caption",)),
            AttributeSpec("type", None, DEFAULT_IMAGE_TYPE),
        ),
        child_policy=ChildPolicy.ATOMIC,
    ),
)

CATALOGUE: Mapping[str, ComponentRule] = MappingProxyType({rule.component_name: rule for rule in _RULES})
"""Read-only registry of component rules keyed by tag name."""


def get_rule(name: Optional[str]) -> Optional[ComponentRule]:
    """Return the rule for a component name, or None for unknown components."""
    if not name:
        return None
    return CATALOGUE.get(name)


def is_known_component(name: Optional[str]) -> bool:
    """Return True when the catalogue has a rule for the name."""
    return get_rule(name) is not None


__all__ = [
    "CATALOGUE",
    "ChildPolicy",
    "ComponentRule",
    "get_rule",
    "is_known_component",
]
