# SPDX-FileCopyrightText: © 2023-2024 Devon D. Sparks
# SPDX-License-Identifier: AGPL-3.0

import json
import logging

from utils.common import is_keyword, is_prefixed

logger = logging.getLogger(__name__)

Separators = ("/", "#")


def _context_entries(context_document):
    """
    Yield the (key, value) pairs of a context, whether given as the
    serialized provider output, a {"@context": ...} wrapper, the bare
    context object or a list of contexts.
    """
    if not context_document:
        return
    if isinstance(context_document, (str, bytes)):
        context_document = json.loads(context_document)
    if isinstance(context_document, dict) and "@context" in context_document:
        context_document = context_document["@context"]
    if isinstance(context_document, list):
        for ctx in context_document:
            if isinstance(ctx, dict):
                yield from ctx.items()
            else:
                logger.debug("Ignoring non-local context reference %r", ctx)
    elif isinstance(context_document, dict):
        yield from context_document.items()


def _namespace_iri(value):
    if isinstance(value, str):
        return value
    if isinstance(value, dict) and value.get("@prefix") is True and isinstance(value.get("@id"), str):
        return value["@id"]
    return None


def extract_namespaces(context_document):
    """
    Reduce a JSON-LD context to its namespace declarations, {prefix: IRI}.

    Only bare prefixes count: keys holding a colon are compact term
    aliases (e.g. "dc11:title") and keywords such as @vocab are skipped.
    Later contexts in a list override earlier ones.
    """
    namespaces = {}
    for (key, value) in _context_entries(context_document):
        if is_keyword(key) or is_prefixed(key):
            continue
        iri = _namespace_iri(value)
        if iri:
            namespaces[key] = iri
    return namespaces


def _local_names(iri, namespace):
    if iri.startswith(namespace) and len(iri) > len(namespace):
        yield iri[len(namespace):]
    if not namespace.endswith(Separators) and iri.startswith(namespace + "/"):
        local = iri[len(namespace) + 1:]
        if local and not any(sep in local for sep in Separators):
            yield local


def compact_iri(iri, namespaces):
    """
    Return every `prefix:localName` spelling of an expanded IRI under the
    given namespaces, longest namespace first, then by prefix.
    """
    matches = []
    for (prefix, namespace) in namespaces.items():
        for local in _local_names(iri, namespace):
            matches.append((-len(namespace), prefix, local))
    return ["{}:{}".format(prefix, local) for (_, prefix, local) in sorted(matches)]
