"""Print an xml.etree.ElementTree tree through the NodeView protocol.

The printer only reads kind/name/value/children/attributes, so a thin
read-only adapter is enough; nothing is copied into xmlprint nodes.
"""

import sys
import xml.etree.ElementTree as ET
from dataclasses import dataclass

from xmlprint import Attribute, NodeKind, print_to_stream, to_string


@dataclass(frozen=True, slots=True)
class TextView:
    value: str
    kind: NodeKind = NodeKind.DATA
    name: None = None
    children: tuple = ()
    attributes: tuple = ()


@dataclass(frozen=True, slots=True)
class ElementView:
    element: ET.Element

    kind = NodeKind.ELEMENT
    value = None

    @property
    def name(self) -> str:
        return self.element.tag

    @property
    def attributes(self) -> tuple[Attribute, ...]:
        return tuple(Attribute(k, v) for k, v in self.element.attrib.items())

    @property
    def children(self) -> tuple:
        views: list = []
        if self.element.text and self.element.text.strip():
            views.append(TextView(self.element.text.strip()))
        for child in self.element:
            views.append(ElementView(child))
            if child.tail and child.tail.strip():
                views.append(TextView(child.tail.strip()))
        return tuple(views)


root = ET.fromstring('<catalog><book id="1"><title>Dune &amp; more</title></book><book id="2"/></catalog>')
print(to_string(ElementView(root)), end="")

# ``sys.stdout << view`` is not available for adapter classes; use the function
print_to_stream(sys.stdout, ElementView(root))
