# SPDX-FileCopyrightText: © 2023-2024 Devon D. Sparks
# SPDX-License-Identifier: AGPL-3.0

"""
Bundle definitions for the record types this service can create.

A definition file looks like

    {
        "namespaces": {"ex": "http://example.org/"},
        "record_types": {
            "fedora_resource": {
                "base_fields": {"id": {"type": "string"}},
                "bundles": {
                    "image": {
                        "label": "Image",
                        "fields": {"title": {"type": "string"}},
                        "rdf_mapping": {
                            "types": ["pcdm:Object"],
                            "fields": {"title": {"properties": ["dc11:title"]}}
                        }
                    }
                }
            }
        }
    }

Namespaces declared in the file are layered over the defaults in
utils.contexts. A bundle without an "rdf_mapping" entry has no RDF mapping
registered at all, which is different from a mapping that lists no fields.
"""

from __future__ import annotations
import json
import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from errors import BundleNotFoundError, RegistryError
from utils.common import is_prefixed, loadjson, split_term
from utils.contexts import DefaultNamespaces, DefaultDatatype, FieldTypeDatatypes

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FieldDefinition:
    name: str
    type: str = "string"
    label: Optional[str] = None


@dataclass
class RdfMapping:
    id: str
    types: List[str] = field(default_factory=list)
    fields: Dict[str, dict] = field(default_factory=dict)

    def get_field_mapping(self, field_name: str) -> dict:
        mapping = self.fields.get(field_name) or {}
        return {
            "properties": list(mapping.get("properties") or []),
            "datatype": mapping.get("datatype"),
        }


@dataclass
class Bundle:
    name: str
    label: str
    fields: Dict[str, FieldDefinition]
    rdf_mapping: Optional[RdfMapping] = None


def _parse_fields(raw: dict, where: str) -> Dict[str, FieldDefinition]:
    if not isinstance(raw, dict):
        raise RegistryError("{}: fields must be an object".format(where))
    fields = {}
    for name, spec in raw.items():
        spec = spec or {}
        fields[name] = FieldDefinition(name=name, type=spec.get("type", "string"), label=spec.get("label"))
    return fields


def _parse_rdf_mapping(mapping_id: str, raw: dict) -> RdfMapping:
    if not isinstance(raw, dict):
        raise RegistryError("{}: rdf_mapping must be an object".format(mapping_id))
    fields = raw.get("fields") or {}
    for field_name, spec in fields.items():
        properties = (spec or {}).get("properties") or []
        if not isinstance(properties, list):
            raise RegistryError("{}.{}: properties must be a list".format(mapping_id, field_name))
        for term in properties:
            if not isinstance(term, str) or not is_prefixed(term):
                raise RegistryError("{}.{}: {!r} is not a prefix:localName term".format(mapping_id, field_name, term))
    return RdfMapping(id=mapping_id, types=list(raw.get("types") or []), fields=dict(fields))


class BundleRegistry:
    """
    Read-only view over the bundles of every configured record type.
    """

    def __init__(self, record_types: dict, namespaces: Optional[dict] = None):
        self._namespaces = {**DefaultNamespaces, **(namespaces or {})}
        self._bundles: Dict[str, Dict[str, Bundle]] = {}
        for record_type, definition in (record_types or {}).items():
            base_fields = _parse_fields(definition.get("base_fields") or {}, record_type)
            bundles = {}
            for name, spec in (definition.get("bundles") or {}).items():
                where = "{}.{}".format(record_type, name)
                fields = {**base_fields, **_parse_fields(spec.get("fields") or {}, where)}
                rdf_mapping = None
                if spec.get("rdf_mapping") is not None:
                    rdf_mapping = _parse_rdf_mapping(where, spec["rdf_mapping"])
                bundles[name] = Bundle(name=name, label=spec.get("label", name), fields=fields, rdf_mapping=rdf_mapping)
            self._bundles[record_type] = bundles
            logger.debug("Registered %d bundles for %s", len(bundles), record_type)

    @staticmethod
    def from_json_path(path) -> "BundleRegistry":
        try:
            data = loadjson(path)
        except (OSError, ValueError) as e:
            raise RegistryError("Unable to read bundle definitions from {}".format(path)) from e
        return BundleRegistry(data.get("record_types") or {}, data.get("namespaces"))

    @property
    def namespaces(self) -> dict:
        return dict(self._namespaces)

    def get_bundle_info(self, record_type: str) -> dict:
        return {name: {"label": b.label} for (name, b) in self._bundles.get(record_type, {}).items()}

    def has_bundle(self, record_type: str, bundle: str) -> bool:
        return bundle in self._bundles.get(record_type, {})

    def get_bundle(self, record_type: str, bundle: str) -> Bundle:
        try:
            return self._bundles[record_type][bundle]
        except KeyError:
            raise BundleNotFoundError("{}.{} is not a registered bundle".format(record_type, bundle))

    def get_field_definitions(self, record_type: str, bundle: str) -> Dict[str, FieldDefinition]:
        return dict(self.get_bundle(record_type, bundle).fields)

    def load_rdf_mapping(self, record_type: str, bundle: str) -> Optional[RdfMapping]:
        return self.get_bundle(record_type, bundle).rdf_mapping


class JsonldContextGenerator:
    """
    Builds the JSON-LD @context of a bundle: every known namespace prefix,
    plus one typed term definition per mapped RDF property.
    """

    def __init__(self, registry: BundleRegistry):
        self.registry = registry

    def get_context(self, ids: str) -> str:
        "Return the serialized context for a `record_type.bundle` identifier."
        record_type, _, bundle_name = ids.partition(".")
        bundle = self.registry.get_bundle(record_type, bundle_name)
        namespaces = self.registry.namespaces
        context = dict(namespaces)
        mapping = bundle.rdf_mapping
        if mapping is not None:
            for field_name, field_def in bundle.fields.items():
                field_mapping = mapping.get_field_mapping(field_name)
                datatype = field_mapping["datatype"] or FieldTypeDatatypes.get(field_def.type, DefaultDatatype)
                for term in field_mapping["properties"]:
                    prefix, _ = split_term(term)
                    if prefix not in namespaces:
                        logger.warning("%s maps %s to %s, but prefix %s is not a known namespace",
                                       ids, field_name, term, prefix)
                    context.setdefault(term, {"@type": datatype})
        return json.dumps({"@context": context})
