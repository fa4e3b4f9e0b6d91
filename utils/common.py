import json
from pathlib import Path


Separator = ":"
Keyword = "@"


def loadjson(path):
    return json.loads(Path(path).read_text())


def is_keyword(key):
    return isinstance(key, str) and key.startswith(Keyword)


def is_prefixed(term):
    return Separator in term


def split_term(term):
    "Split a compact `prefix:localName` term into its two halves."
    prefix, _, local_name = term.partition(Separator)
    return prefix, local_name
