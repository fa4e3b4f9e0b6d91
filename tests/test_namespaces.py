import json
import unittest

from resolver.namespaces import compact_iri, extract_namespaces


class TestExtractNamespaces(unittest.TestCase):
    def test_keeps_only_bare_prefixes(self):
        ctx = {"@context": {
            "dc11": "http://purl.org/dc/elements/1.1/",
            "rdfs": "http://www.w3.org/2000/01/rdf-schema#",
            "dc11:title": {"@type": "xsd:string"},
            "@vocab": "http://example.org/",
        }}
        self.assertEqual(extract_namespaces(ctx), {
            "dc11": "http://purl.org/dc/elements/1.1/",
            "rdfs": "http://www.w3.org/2000/01/rdf-schema#",
        })

    def test_accepts_serialized_and_bare_contexts(self):
        bare = {"ex": "http://example.org/"}
        self.assertEqual(extract_namespaces(json.dumps({"@context": bare})), bare)
        self.assertEqual(extract_namespaces(bare), bare)

    def test_empty_or_missing_context(self):
        self.assertEqual(extract_namespaces(None), {})
        self.assertEqual(extract_namespaces({}), {})
        self.assertEqual(extract_namespaces(""), {})
        self.assertEqual(extract_namespaces({"@context": {}}), {})

    def test_list_contexts_merge_and_skip_remote_references(self):
        ctx = {"@context": [
            "http://example.org/remote-context.jsonld",
            {"ex": "http://example.org/one/"},
            {"ex": "http://example.org/two/", "other": "http://other.org/"},
        ]}
        self.assertEqual(extract_namespaces(ctx), {
            "ex": "http://example.org/two/",
            "other": "http://other.org/",
        })

    def test_expanded_definitions_need_prefix_flag(self):
        ctx = {
            "schema": {"@id": "http://schema.org/", "@prefix": True},
            "title": {"@id": "http://purl.org/dc/terms/title"},
        }
        self.assertEqual(extract_namespaces(ctx), {"schema": "http://schema.org/"})


class TestCompactIri(unittest.TestCase):
    namespaces = {
        "dc11": "http://purl.org/dc/elements/1.1/",
        "dcterms": "http://purl.org/dc/terms/",
        "rdfs": "http://www.w3.org/2000/01/rdf-schema#",
    }

    def test_slash_and_hash_namespaces(self):
        self.assertEqual(compact_iri("http://purl.org/dc/elements/1.1/title", self.namespaces), ["dc11:title"])
        self.assertEqual(compact_iri("http://www.w3.org/2000/01/rdf-schema#label", self.namespaces), ["rdfs:label"])

    def test_unknown_namespace(self):
        self.assertEqual(compact_iri("http://example.org/title", self.namespaces), [])

    def test_namespace_itself_is_not_a_term(self):
        self.assertEqual(compact_iri("http://purl.org/dc/terms/", self.namespaces), [])

    def test_longest_namespace_first(self):
        namespaces = {"dc": "http://purl.org/dc/", "dcterms": "http://purl.org/dc/terms/"}
        self.assertEqual(compact_iri("http://purl.org/dc/terms/title", namespaces),
                         ["dcterms:title", "dc:terms/title"])

    def test_shared_namespace_yields_every_prefix(self):
        namespaces = {"dc11": "http://purl.org/dc/elements/1.1/", "dc": "http://purl.org/dc/elements/1.1/"}
        self.assertEqual(compact_iri("http://purl.org/dc/elements/1.1/title", namespaces),
                         ["dc:title", "dc11:title"])

    def test_both_trailing_separator_forms(self):
        namespaces = {"ex": "http://example.org/vocab"}
        self.assertEqual(compact_iri("http://example.org/vocab/title", namespaces), ["ex:/title", "ex:title"])
        self.assertEqual(compact_iri("http://example.org/vocabtitle", namespaces), ["ex:title"])

    def test_local_names_may_hold_separators(self):
        namespaces = {"ex": "http://example.org/"}
        self.assertEqual(compact_iri("http://example.org/a/b", namespaces), ["ex:a/b"])
        self.assertEqual(compact_iri("http://example.org/a#b", namespaces), ["ex:a#b"])

    def test_normalized_form_keeps_single_segment(self):
        namespaces = {"ex": "http://example.org/vocab"}
        self.assertEqual(compact_iri("http://example.org/vocab/a/b", namespaces), ["ex:/a/b"])


if __name__ == "__main__":
    unittest.main()
