"""Print an XML tree in a few lines — zero config, zero deps."""

import sys

from xmlprint import Attribute, Data, Declaration, Document, Element, PrintFlags, to_string

doc = Document(children=(
    Declaration(attributes=(Attribute("version", "1.0"),)),
    Element("greeting", attributes=(Attribute("lang", "en"),), children=(Data("Hello & welcome"),)),
))

sys.stdout << doc
print(to_string(doc, PrintFlags.NO_INDENTING))
