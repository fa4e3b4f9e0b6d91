# SPDX-FileCopyrightText: © 2023-2024 Devon D. Sparks
# SPDX-License-Identifier: AGPL-3.0

from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, List, Optional

from errors import MappingUnavailable

AttributeMapping = Dict[str, List[str]]


@dataclass(frozen=True)
class MappingLookup:
    """
    Outcome of loading a bundle's attribute mapping. Exactly one of
    `mapping` and `error` is set; callers pick their own failure policy.
    """
    mapping: Optional[AttributeMapping] = None
    error: Optional[MappingUnavailable] = None

    @classmethod
    def found(cls, mapping: AttributeMapping) -> "MappingLookup":
        return cls(mapping=mapping)

    @classmethod
    def missing(cls, error: MappingUnavailable) -> "MappingLookup":
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None


def load_attribute_mappings(registry, record_type: str, bundle: str) -> MappingLookup:
    """
    Map every field of the bundle that declares RDF properties to its
    terms, e.g. {"title": ["dc11:title", "rdfs:label"]}, in field order.
    """
    fields = registry.get_field_definitions(record_type, bundle)
    rdf_mapping = registry.load_rdf_mapping(record_type, bundle)
    if rdf_mapping is None:
        return MappingLookup.missing(
            MappingUnavailable("No RDF mapping registered for {}.{}".format(record_type, bundle)))

    mapping: AttributeMapping = {}
    for field_name in fields:
        properties = rdf_mapping.get_field_mapping(field_name)["properties"]
        if properties:
            mapping[field_name] = properties
    return MappingLookup.found(mapping)
