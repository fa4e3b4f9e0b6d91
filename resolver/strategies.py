# SPDX-FileCopyrightText: © 2023-2024 Devon D. Sparks
# SPDX-License-Identifier: AGPL-3.0

import json
import logging
from abc import ABC, abstractmethod

from pyld import jsonld

from resolver.namespaces import compact_iri, extract_namespaces
from utils import local_document_loader

logger = logging.getLogger(__name__)


class Resolver(ABC):
    """
    A lookup table from expanded property IRIs to attribute names,
    built for one bundle and thrown away after the request.
    """

    @abstractmethod
    def resolve(self, iri):
        """
        Return the attribute name an expanded IRI maps to, or None.
        """

    def __call__(self, iri):
        return self.resolve(iri)


class ResolutionStrategy(ABC):
    name = None

    @abstractmethod
    def build(self, mapping, context):
        """
        Combine an attribute mapping ({name: [terms]}) with the bundle's
        @context into a Resolver.
        """


class DirectMatchResolver(Resolver):
    def __init__(self, mapping, namespaces):
        self.mapping = mapping
        self.namespaces = namespaces

    def resolve(self, iri):
        candidates = compact_iri(iri, self.namespaces)
        if not candidates:
            return None
        for (attribute, terms) in self.mapping.items():
            for term in terms:
                if term in candidates:
                    return attribute
        return None


class DirectMatchStrategy(ResolutionStrategy):
    """
    Compact the incoming IRI to `prefix:localName` with the context's
    namespaces and look for the attribute declaring that term.
    """
    name = "direct"

    def build(self, mapping, context):
        return DirectMatchResolver(mapping, extract_namespaces(context))


class ExpandedTermResolver(Resolver):
    def __init__(self, attributes, expanded):
        self.attributes = attributes
        self.expanded = expanded

    def resolve(self, iri):
        try:
            return self.attributes[self.expanded.index(iri)]
        except ValueError:
            return None


class ExpandedTermStrategy(ResolutionStrategy):
    """
    Expand each attribute's first declared term through the bundle's
    context and line the results up with the attribute names.
    """
    name = "expanded"

    def build(self, mapping, context):
        first_terms = {}
        for (attribute, terms) in mapping.items():
            first_terms.setdefault(terms[0], attribute)

        # The placeholder value carries the attribute name through expansion.
        synthetic = {"@context": _local_context(context)}
        for term in sorted(first_terms):
            synthetic[term] = {"@value": first_terms[term]}

        expanded_doc = jsonld.expand(synthetic, {"documentLoader": local_document_loader})
        attributes, expanded = [], []
        for node in expanded_doc:
            for (iri, values) in node.items():
                attributes.append(values[0]["@value"])
                expanded.append(iri)
        if len(expanded) != len(first_terms):
            logger.debug("Only %d of %d terms expanded to IRIs", len(expanded), len(first_terms))
        return ExpandedTermResolver(attributes, expanded)


def _local_context(context):
    if isinstance(context, (str, bytes)):
        context = json.loads(context)
    if isinstance(context, dict) and "@context" in context:
        return context["@context"]
    return context or {}


Strategies = {cls.name: cls for cls in (DirectMatchStrategy, ExpandedTermStrategy)}


def get_strategy(name):
    try:
        return Strategies[name]()
    except KeyError:
        raise ValueError("Unknown resolution strategy: {}".format(name))
