"""
Entity Tools

Handlers for entity CRUD, listing and semantic search. Each handler takes
the API and the tool arguments and returns a Success or Failure.
"""

from nexmemory.configs import get_logger
from nexmemory.tools.api import KnowledgeBaseAPI, path_segment
from nexmemory.tools.outcomes import (
    Failure,
    Outcome,
    Success,
    decode_body,
    http_failure,
    not_found,
    pretty_json,
    require,
    require_id,
)

logger = get_logger("tools.entities")

# Optional create_entity fields forwarded only when the caller supplies them
CREATE_OPTIONAL_FIELDS = ("description", "properties", "parent_id", "relationship_type")

PARTIAL_SUCCESS_NOTE = (
    "Note: the knowledge base reported a partial success (HTTP 206). "
    "The entity was created but its relationship could not be fully applied."
)

DEFAULT_LIST_LIMIT = 50
DEFAULT_SEARCH_LIMIT = 10


def create_entity(api: KnowledgeBaseAPI, arguments: dict) -> Outcome:
    missing = require(arguments, "name", "tags")
    if missing:
        return missing

    body = {"name": arguments["name"], "tags": arguments["tags"]}
    for name in CREATE_OPTIONAL_FIELDS:
        if arguments.get(name) is not None:
            body[name] = arguments[name]

    response = api.request("POST", "/entities", body=body)
    if response.status not in (201, 206):
        return http_failure(response)

    text = f"Entity created successfully:\n{pretty_json(decode_body(response))}"
    if response.status == 206:
        logger.warning(f"Partial success creating entity {arguments['name']!r}")
        text = f"{text}\n\n{PARTIAL_SUCCESS_NOTE}"
    return Success(text)


def get_entity(api: KnowledgeBaseAPI, arguments: dict) -> Outcome:
    entity_id = require_id(arguments)
    if isinstance(entity_id, Failure):
        return entity_id

    response = api.request("GET", f"/entities/{path_segment(entity_id)}")
    if response.status == 200:
        return Success(pretty_json(decode_body(response)))
    if response.status == 404:
        return not_found("Entity", entity_id)
    return http_failure(response)


def update_entity(api: KnowledgeBaseAPI, arguments: dict) -> Outcome:
    entity_id = require_id(arguments)
    if isinstance(entity_id, Failure):
        return entity_id

    body = {key: value for key, value in arguments.items() if key != "id"}
    response = api.request("PUT", f"/entities/{path_segment(entity_id)}", body=body)
    if response.status == 200:
        return Success(f"Entity updated successfully:\n{pretty_json(decode_body(response))}")
    if response.status == 404:
        return not_found("Entity", entity_id)
    return http_failure(response)


def delete_entity(api: KnowledgeBaseAPI, arguments: dict) -> Outcome:
    entity_id = require_id(arguments)
    if isinstance(entity_id, Failure):
        return entity_id

    response = api.request("DELETE", f"/entities/{path_segment(entity_id)}")
    if response.status in (200, 204):
        return Success(f"Entity {entity_id} deleted successfully")
    if response.status == 404:
        return not_found("Entity", entity_id)
    return http_failure(response)


def list_entities(api: KnowledgeBaseAPI, arguments: dict) -> Outcome:
    query = {
        "limit": arguments.get("limit") or DEFAULT_LIST_LIMIT,
        "offset": arguments.get("offset") or 0,
    }
    tags = arguments.get("tags") or []
    if tags:
        query["tags"] = ",".join(str(tag) for tag in tags)

    response = api.request("GET", "/entities", query=query)
    if response.status != 200:
        return http_failure(response)

    entities = decode_body(response)
    return Success(f"Found {len(entities)} entities:\n{pretty_json(entities)}")


def search_entities(api: KnowledgeBaseAPI, arguments: dict) -> Outcome:
    missing = require(arguments, "query")
    if missing:
        return missing
    if not isinstance(arguments["query"], str):
        return Failure("query must be a string")

    body = {
        "query": arguments["query"],
        "limit": arguments.get("limit") or DEFAULT_SEARCH_LIMIT,
    }
    response = api.request("POST", "/memory/search", body=body)
    if response.status != 200:
        return http_failure(response)

    result = decode_body(response)
    if not isinstance(result, dict):
        return Failure(f"Unexpected search response: {pretty_json(result)}")
    results = result.get("results", [])
    count = result.get("count", len(results))
    return Success(f"Found {count} results:\n{pretty_json(results)}")


HANDLERS = {
    "create_entity": create_entity,
    "get_entity": get_entity,
    "update_entity": update_entity,
    "delete_entity": delete_entity,
    "list_entities": list_entities,
    "search_entities": search_entities,
}
