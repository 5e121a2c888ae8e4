"""
Service layer.

Each service encapsulates the business rules of one domain on top of
the repositories: existence and uniqueness checks, authorization, and
multi-step operations such as create-then-notify.  Services are the
only place authorization and invariant checks happen.  They take their
repositories and outbound clients as constructor arguments, with
production defaults.
"""
