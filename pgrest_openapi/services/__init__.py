"""Service modules for pgrest-openapi.

``OpenAPIService`` depends on the settings module and is imported from
``pgrest_openapi.services.openapi_service`` directly.
"""

from pgrest_openapi.services.type_mapper import to_swagger_type
from pgrest_openapi.services.definitions import (
    column_description,
    make_definitions,
    make_table_def,
)
from pgrest_openapi.services.parameters import make_param_defs
from pgrest_openapi.services.paths import (
    make_path_item,
    make_path_items,
    make_proc_path_item,
    split_description,
)
from pgrest_openapi.services.document import (
    ServerLocation,
    encode_openapi,
    escape_host_name,
    postgrest_spec,
)
from pgrest_openapi.services.proxy import is_malformed_proxy_uri, pick_proxy
from pgrest_openapi.services.introspection import (
    DbStructure,
    load_db_structure,
    parse_db_structure,
)

__all__ = [
    # Type mapping
    "to_swagger_type",
    # Definitions
    "column_description",
    "make_definitions",
    "make_table_def",
    # Parameters
    "make_param_defs",
    # Paths
    "make_path_item",
    "make_path_items",
    "make_proc_path_item",
    "split_description",
    # Document
    "ServerLocation",
    "encode_openapi",
    "escape_host_name",
    "postgrest_spec",
    # Proxy
    "is_malformed_proxy_uri",
    "pick_proxy",
    # Introspection
    "DbStructure",
    "load_db_structure",
    "parse_db_structure",
]
