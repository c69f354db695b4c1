"""
Application package initializer.

The service is split into layers that each live in their own
subpackage:

* ``api`` – versioned FastAPI routers (the transport layer);
* ``services`` – business rules such as name uniqueness;
* ``repositories`` – persistence mechanics behind an abstract contract;
* ``schemas`` – Pydantic models shared by all layers;
* ``core`` – configuration, logging, database handle and errors.

Requests flow strictly downwards (api → services → repositories) and
results flow back up.
"""

from .main import app  # noqa: F401
