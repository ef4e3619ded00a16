"""
Pydantic schema definitions for API payloads.

Request models are lenient on purpose: every field may be missing and
no type is enforced, so a request without ``title`` or ``content``
still produces a record.  Extra fields in a request body are ignored.
"""
