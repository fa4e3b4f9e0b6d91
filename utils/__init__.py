from pyld import jsonld


def local_document_loader(url, options={}):
    """
    Contexts are supplied inline by the bundle registry. Any attempt
    to dereference a remote @context is refused.
    """
    raise jsonld.JsonLdError(
        "Remote contexts are not supported: {}".format(url),
        "jsonld.LoadDocumentError",
        {"url": url}, code="loading remote context failed")


# Override PyLD's default Requests-based document loader 
# so expansion never leaves the process.
jsonld.set_document_loader(local_document_loader)
