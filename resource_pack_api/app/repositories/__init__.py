"""
Repository layer.

One repository per entity family.  Repositories wrap a document store
collection, apply the legacy mappers so callers only ever see domain
schemas, check cross-collection references on write and perform the
joins the store cannot do itself.  They keep no state between calls.
"""
