"""Parse inline markup and print the tree as nested tuples."""

from pprint import pprint

from marcas import densify, parse
from marcas.text import outline

source = "hello **[#f00] red** world ✨"
pprint(outline(source, densify(parse(source))))
