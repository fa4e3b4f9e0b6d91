import unittest
from pathlib import Path

from registry import BundleRegistry, JsonldContextGenerator
from resolver.mappings import load_attribute_mappings
from resolver.strategies import DirectMatchStrategy, ExpandedTermStrategy, get_strategy

BUNDLES_PATH = Path(__file__).resolve().parent.parent / "static" / "bundles.json"

DC11 = "http://purl.org/dc/elements/1.1/"
DCTERMS = "http://purl.org/dc/terms/"
RDFS = "http://www.w3.org/2000/01/rdf-schema#"
FEDORA = "http://fedora.info/definitions/v4/repository#"


def expand_term(term, namespaces):
    prefix, local = term.split(":", 1)
    return namespaces[prefix] + local


class StrategyTestMixin:
    strategy = None

    def setUp(self):
        self.registry = BundleRegistry.from_json_path(BUNDLES_PATH)
        self.mapping = load_attribute_mappings(self.registry, "fedora_resource", "rdf_source").mapping
        self.context = JsonldContextGenerator(self.registry).get_context("fedora_resource.rdf_source")
        self.resolve = self.strategy.build(self.mapping, self.context)

    def test_first_declared_terms(self):
        self.assertEqual(self.resolve(DC11 + "title"), "name")
        self.assertEqual(self.resolve(DC11 + "description"), "description")
        self.assertEqual(self.resolve(DC11 + "subject"), "subject")
        self.assertEqual(self.resolve(FEDORA + "created"), "created")
        self.assertEqual(self.resolve(FEDORA + "lastModified"), "changed")

    def test_unmapped(self):
        self.assertIsNone(self.resolve(DCTERMS + "title"))
        self.assertIsNone(self.resolve("http://example.org/unknown"))
        self.assertIsNone(self.resolve("@type"))

    def test_round_trip_of_first_terms(self):
        namespaces = self.registry.namespaces
        resolved = [self.resolve(expand_term(terms[0], namespaces)) for terms in self.mapping.values()]
        self.assertEqual(resolved, list(self.mapping))

    def test_local_name_with_slash_round_trips(self):
        mapping = {"part": ["ex:a/b"], "title": ["ex:title"]}
        resolve = self.strategy.build(mapping, {"ex": "http://example.org/"})
        self.assertEqual(resolve("http://example.org/a/b"), "part")
        self.assertEqual(resolve("http://example.org/title"), "title")
        self.assertIsNone(resolve("http://example.org/a"))


class TestDirectMatchStrategy(StrategyTestMixin, unittest.TestCase):
    strategy = DirectMatchStrategy()

    def test_every_declared_term_resolves(self):
        self.assertEqual(self.resolve(RDFS + "label"), "name")
        self.assertEqual(self.resolve(DCTERMS + "description"), "description")

    def test_round_trip_of_every_term(self):
        namespaces = self.registry.namespaces
        for (attribute, terms) in self.mapping.items():
            for term in terms:
                self.assertEqual(self.resolve(expand_term(term, namespaces)), attribute, term)

    def test_first_declared_attribute_wins(self):
        mapping = {"title": ["ex:name"], "label": ["ex:label", "ex:name"]}
        resolve = self.strategy.build(mapping, {"ex": "http://example.org/"})
        self.assertEqual(resolve("http://example.org/name"), "title")
        self.assertEqual(resolve("http://example.org/label"), "label")

    def test_unknown_prefix_in_context(self):
        resolve = self.strategy.build({"title": ["ex:title"]}, {})
        self.assertIsNone(resolve("http://example.org/title"))


class TestExpandedTermStrategy(StrategyTestMixin, unittest.TestCase):
    strategy = ExpandedTermStrategy()

    def test_only_first_terms_are_expanded(self):
        self.assertIsNone(self.resolve(RDFS + "label"))
        self.assertIsNone(self.resolve(DCTERMS + "description"))

    def test_duplicate_first_terms_keep_first_attribute(self):
        mapping = {"title": ["ex:name"], "label": ["ex:name"]}
        resolve = self.strategy.build(mapping, {"@context": {"ex": "http://example.org/"}})
        self.assertEqual(resolve("http://example.org/name"), "title")

    def test_attribute_names_align_regardless_of_order(self):
        mapping = {"zeta": ["ex:a"], "alpha": ["ex:z"], "mid": ["ex:m"]}
        resolve = self.strategy.build(mapping, {"ex": "http://example.org/"})
        self.assertEqual(resolve("http://example.org/a"), "zeta")
        self.assertEqual(resolve("http://example.org/z"), "alpha")
        self.assertEqual(resolve("http://example.org/m"), "mid")


class TestGetStrategy(unittest.TestCase):
    def test_known_names(self):
        self.assertIsInstance(get_strategy("direct"), DirectMatchStrategy)
        self.assertIsInstance(get_strategy("expanded"), ExpandedTermStrategy)

    def test_unknown_name(self):
        with self.assertRaises(ValueError):
            get_strategy("fuzzy")


if __name__ == "__main__":
    unittest.main()
