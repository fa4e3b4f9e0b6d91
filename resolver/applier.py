# SPDX-FileCopyrightText: © 2023-2024 Devon D. Sparks
# SPDX-License-Identifier: AGPL-3.0

import logging
from collections import namedtuple

from pyld.jsonld import JsonLdError

from errors import CreationError, ResolutionFailure, ResourceError
from resolver.mappings import load_attribute_mappings
from utils.common import is_keyword

logger = logging.getLogger(__name__)

CreatedRecord = namedtuple("CreatedRecord", ["id", "url", "attributes"])


def extract_value(property, values):
    "Return the scalar payload of the first value-object of a property."
    try:
        return values[0]["@value"]
    except (IndexError, KeyError, TypeError) as e:
        raise ResolutionFailure("{} has no @value in its first value object".format(property)) from e


def iter_properties(document):
    if not isinstance(document, dict):
        raise ResolutionFailure("Expected a JSON object, got {}".format(type(document).__name__))
    for (property, values) in document.items():
        # @type and other keywords are never attributes.
        if is_keyword(property):
            continue
        yield (property, values)


class ResourceCreator:
    """
    Creates records from expanded JSON-LD documents.

    registry         -- bundle field definitions and RDF mappings
    context_provider -- returns a bundle's serialized @context for "type.bundle"
    store            -- a storage.RecordStore
    strategy         -- a resolver.strategies.ResolutionStrategy
    """

    def __init__(self, registry, context_provider, store, strategy):
        self.registry = registry
        self.context_provider = context_provider
        self.store = store
        self.strategy = strategy

    def build_resolver(self, record_type, bundle, mapping):
        context = self.context_provider.get_context("{}.{}".format(record_type, bundle))
        return self.strategy.build(mapping, context)

    def resolve_document(self, record_type, bundle, document):
        """
        Dry run: map each property of the document to its attribute name
        (None when unmapped) without touching the store.
        """
        lookup = load_attribute_mappings(self.registry, record_type, bundle)
        if not lookup.ok:
            raise lookup.error
        resolver = self.build_resolver(record_type, bundle, lookup.mapping)
        return {property: resolver(property) for (property, _) in iter_properties(document)}

    def create_record(self, record_type, bundle, document):
        """
        Returns a CreatedRecord, or None when the bundle has no RDF mapped
        attributes and there is nothing to create.
        """
        lookup = load_attribute_mappings(self.registry, record_type, bundle)
        if not lookup.ok:
            logger.info("%s", lookup.error)
            return None
        if not lookup.mapping:
            logger.info("No RDF mapped attributes for %s.%s", record_type, bundle)
            return None

        try:
            resolver = self.build_resolver(record_type, bundle, lookup.mapping)
            assignments = []
            for (property, values) in iter_properties(document):
                attribute = resolver(property)
                if attribute is None:
                    logger.debug("Dropping unmapped property %s", property)
                    continue
                assignments.append((attribute, extract_value(property, values)))

            fields = self.registry.get_field_definitions(record_type, bundle)
            record = self.store.create_record(record_type, bundle, fields)
            for (attribute, value) in assignments:
                record.set_attribute(attribute, value)
            (id, url) = record.save()
        except (ResourceError, JsonLdError) as e:
            raise CreationError("Failed to create {}.{} record: {}".format(record_type, bundle, e)) from e

        logger.info("Created %s.%s record %s", record_type, bundle, id)
        return CreatedRecord(id, url, dict(record.attributes))
