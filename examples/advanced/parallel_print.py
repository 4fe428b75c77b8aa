"""Thread safe — print 1000 trees in parallel with one shared printer."""

from concurrent.futures import ThreadPoolExecutor

from xmlprint import Data, Document, Element, XmlPrinter

trees = [
    Document(children=(Element("doc", children=(Element("title", children=(Data(f"Doc {i}"),)),)),))
    for i in range(1000)
]

printer = XmlPrinter()
with ThreadPoolExecutor(max_workers=8) as ex:
    results = list(ex.map(printer.render, trees))

print(f"Printed {len(results)} documents in parallel")
print(results[0], end="")
