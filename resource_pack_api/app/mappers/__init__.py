"""
Legacy mappers.

The document store still holds records in the flat layout of the
previous API version.  Each module here defines that *legacy* shape
as its own model next to pure ``map_*``/``unmap_*`` functions
translating between it and the domain schemas.  Nothing in this
package performs I/O.
"""
