# SPDX-FileCopyrightText: © 2023-2024 Devon D. Sparks 
# SPDX-License-Identifier: AGPL-3.0

import json
import sys
import argparse

from pyld.jsonld import JsonLdError

from errors import ResourceError
from registry import BundleRegistry, JsonldContextGenerator
from resolver.applier import ResourceCreator
from resolver.strategies import Strategies, get_strategy
from storage import MemoryRecordStore


def main(argv=None):
    parser = argparse.ArgumentParser(
        description='Show which bundle attribute each property of an expanded JSON-LD document resolves to')
    parser.add_argument('-c', '--config', dest='config', default='static/bundles.json',
                        help='Bundle definition file')
    parser.add_argument('-t', '--type', dest='record_type', default='fedora_resource')
    parser.add_argument('-b', '--bundle', dest='bundle', required=True)
    parser.add_argument('-s', '--strategy', dest='strategy', choices=sorted(Strategies), default='direct')
    parser.add_argument('-f', '--file', dest='file', type=argparse.FileType('r'), default=sys.stdin,
                        help='Expanded JSON-LD input file')
    args = parser.parse_args(argv)

    registry = BundleRegistry.from_json_path(args.config)
    creator = ResourceCreator(registry, JsonldContextGenerator(registry),
                              MemoryRecordStore(), get_strategy(args.strategy))
    with args.file as f:
        document = json.load(f)
    try:
        resolved = creator.resolve_document(args.record_type, args.bundle, document)
    except (ResourceError, JsonLdError, ValueError) as e:
        print("Error: {}".format(e), file=sys.stderr)
        return 1
    print(json.dumps(resolved, indent=4))
    return 0


if __name__ == "__main__":
    sys.exit(main())
