# SPDX-FileCopyrightText: © 2023-2024 Devon D. Sparks 
# SPDX-License-Identifier: AGPL-3.0

import json
import logging

from flask import Flask, request, jsonify
from mimeparse import best_match

from errors import BundleNotFoundError, CreationError
from registry import BundleRegistry, JsonldContextGenerator
from resolver import ResourceCreator, get_strategy
from settings import get_settings
from storage import MemoryRecordStore

HEADER_CONTENT_TYPE = "Content-Type"
HEADER_BUNDLE = "X-Islandora-Bundle"

input_mimetypes = ["application/ld+json", "application/json"]


def reply(data, status):
    return jsonify({"data": data}), status


def make_creator(settings, registry=None, store=None):
    if registry is None:
        registry = BundleRegistry.from_json_path(settings.bundles_path)
    if store is None:
        store = MemoryRecordStore(settings.base_url)
    return ResourceCreator(registry,
                           JsonldContextGenerator(registry),
                           store,
                           get_strategy(settings.resolution_strategy))


def create_app(settings=None, creator=None):
    """
    Build the Flask application. Collaborators default to the ones
    described by the settings; tests hand in their own creator.
    """
    settings = settings or get_settings()
    if creator is None:
        creator = make_creator(settings)
    record_type = settings.record_type

    app = Flask(__name__)
    app.logger.setLevel(settings.log_level)
    app.config["SETTINGS"] = settings
    app.extensions["resource_creator"] = creator

    @app.route("/{}".format(record_type), methods=["POST"])
    def post_resource():
        content_type = request.headers.get(HEADER_CONTENT_TYPE)
        bundle = request.headers.get(HEADER_BUNDLE)

        if not bundle:
            return reply("X-Islandora-Bundle header not defined", 400)

        if bundle not in creator.registry.get_bundle_info(record_type):
            return reply("Bundle not found.", 400)

        if content_type:
            try:
                if not best_match(input_mimetypes, content_type):
                    app.logger.warning("Treating %s body as JSON-LD", content_type)
            except ValueError:
                app.logger.warning("Unparseable Content-Type %r, treating body as JSON-LD", content_type)

        try:
            content = json.loads(request.get_data(as_text=True))
            created = creator.create_record(record_type, bundle, content)
        except (CreationError, ValueError) as e:
            app.logger.error("Failed to create %s.%s: %s", record_type, bundle, e, exc_info=True)
            return reply("Failed to create entity.", 500)

        if created is None:
            return reply("RDF Mapping not set.", 500)

        response, status = reply("created entity with id {}".format(created.id), 201)
        response.headers["Location"] = created.url
        return response, status

    @app.route("/{}/<id>".format(record_type), methods=["GET"])
    def get_resource(id):
        found = creator.store.get(record_type, id)
        if found is None:
            return reply("Entity not found.", 404)
        return jsonify(found)

    @app.route("/bundles/<bundle>/context", methods=["GET"])
    def get_context(bundle):
        try:
            context = creator.context_provider.get_context("{}.{}".format(record_type, bundle))
        except BundleNotFoundError:
            return reply("Bundle not found.", 404)
        return app.response_class(context, mimetype="application/ld+json")

    return app


if __name__ == '__main__':
    settings = get_settings()
    logging.basicConfig(level=settings.log_level)
    app = create_app(settings)
    app.logger.info("Serving {} bundles: {}".format(
        settings.record_type, sorted(app.extensions["resource_creator"].registry.get_bundle_info(settings.record_type))))
    app.run(debug=False, host='0.0.0.0')
