# SPDX-FileCopyrightText: © 2023-2024 Devon D. Sparks 
# SPDX-License-Identifier: AGPL-3.0

from resolver.namespaces import extract_namespaces, compact_iri
from resolver.mappings import MappingLookup, load_attribute_mappings
from resolver.strategies import (ResolutionStrategy, DirectMatchStrategy,
                                 ExpandedTermStrategy, get_strategy)
from resolver.applier import CreatedRecord, ResourceCreator, extract_value
