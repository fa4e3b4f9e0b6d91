from rdflib import Namespace
from rdflib.namespace import DC, DCTERMS, FOAF, OWL, RDF, RDFS, SKOS, XSD


LDP = Namespace("http://www.w3.org/ns/ldp#")
FEDORA = Namespace("http://fedora.info/definitions/v4/repository#")
EBUCORE = Namespace("http://www.ebu.ch/metadata/ontologies/ebucore/ebucore#")
PCDM = Namespace("http://pcdm.org/models#")
SCHEMA = Namespace("http://schema.org/")
ISLANDORA = Namespace("http://islandora.ca/CLAW/")

DefaultNamespaces = {
    "dc11": str(DC),
    "dcterms": str(DCTERMS),
    "foaf": str(FOAF),
    "owl": str(OWL),
    "rdf": str(RDF),
    "rdfs": str(RDFS),
    "skos": str(SKOS),
    "xsd": str(XSD),
    "ldp": str(LDP),
    "fedora": str(FEDORA),
    "ebucore": str(EBUCORE),
    "pcdm": str(PCDM),
    "schema": str(SCHEMA),
    "islandora": str(ISLANDORA),
}

DefaultDatatype = "xsd:string"

# Term definitions the generator attaches to every mapped property.
FieldTypeDatatypes = {
    "string": "xsd:string",
    "text": "xsd:string",
    "integer": "xsd:integer",
    "decimal": "xsd:decimal",
    "float": "xsd:double",
    "boolean": "xsd:boolean",
    "datetime": "xsd:dateTime",
    "uri": "@id",
}
