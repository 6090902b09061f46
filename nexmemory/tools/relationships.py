"""
Relationship Tools

Handlers for relationships between entities.
"""

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

UPDATABLE_FIELDS = ("predicate", "bidirectional", "properties")


def create_relationship(api: KnowledgeBaseAPI, arguments: dict) -> Outcome:
    missing = require(arguments, "source_id", "target_id", "predicate")
    if missing:
        return missing

    body = {
        "source_id": arguments["source_id"],
        "target_id": arguments["target_id"],
        "predicate": arguments["predicate"],
        "bidirectional": bool(arguments.get("bidirectional", False)),
        "properties": arguments.get("properties") or {},
    }
    response = api.request("POST", "/relationships", body=body)
    if response.status != 201:
        return http_failure(response)
    return Success(f"Relationship created successfully:\n{pretty_json(decode_body(response))}")


def get_relationship(api: KnowledgeBaseAPI, arguments: dict) -> Outcome:
    relationship_id = require_id(arguments)
    if isinstance(relationship_id, Failure):
        return relationship_id

    response = api.request("GET", f"/relationships/{path_segment(relationship_id)}")
    if response.status == 200:
        return Success(pretty_json(decode_body(response)))
    if response.status == 404:
        return not_found("Relationship", relationship_id)
    return http_failure(response)


def update_relationship(api: KnowledgeBaseAPI, arguments: dict) -> Outcome:
    relationship_id = require_id(arguments)
    if isinstance(relationship_id, Failure):
        return relationship_id

    # Only forward what the caller explicitly set
    body = {key: arguments[key] for key in UPDATABLE_FIELDS if key in arguments}
    response = api.request("PUT", f"/relationships/{path_segment(relationship_id)}", body=body)
    if response.status == 200:
        return Success(f"Relationship updated successfully:\n{pretty_json(decode_body(response))}")
    if response.status == 404:
        return not_found("Relationship", relationship_id)
    return http_failure(response)


def delete_relationship(api: KnowledgeBaseAPI, arguments: dict) -> Outcome:
    relationship_id = require_id(arguments)
    if isinstance(relationship_id, Failure):
        return relationship_id

    response = api.request("DELETE", f"/relationships/{path_segment(relationship_id)}")
    if response.status in (200, 204):
        return Success(f"Relationship {relationship_id} deleted successfully")
    if response.status == 404:
        return not_found("Relationship", relationship_id)
    return http_failure(response)


def list_entity_relationships(api: KnowledgeBaseAPI, arguments: dict) -> Outcome:
    entity_id = require_id(arguments, "entity_id")
    if isinstance(entity_id, Failure):
        return entity_id

    response = api.request("GET", f"/entities/{path_segment(entity_id)}/relationships")
    if response.status != 200:
        return http_failure(response)

    relationships = decode_body(response)
    return Success(
        f"Found {len(relationships)} relationships for entity {entity_id}:\n"
        f"{pretty_json(relationships)}"
    )


HANDLERS = {
    "create_relationship": create_relationship,
    "get_relationship": get_relationship,
    "update_relationship": update_relationship,
    "delete_relationship": delete_relationship,
    "list_entity_relationships": list_entity_relationships,
}
