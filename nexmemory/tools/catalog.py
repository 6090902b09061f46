"""
Tool Catalog

MCP tool definitions advertised through tools/list. The input schemas are
descriptive only; handlers validate their own required arguments.
"""

from typing import Any

# --- Tool Schemas ---

TOOL_SCHEMAS: tuple[dict[str, Any], ...] = (
    {
        "name": "create_entity",
        "description": (
            "Create a new entity in the knowledge base with name, description, tags, "
            "and optional properties. Optionally link it to a parent entity."
        ),
        "inputSchema": {
            "type": "object",
            "properties": {
                "name": {"type": "string", "description": "The name of the entity"},
                "description": {"type": "string", "description": "A detailed description of the entity"},
                "tags": {
                    "type": "array",
                    "items": {"type": "string"},
                    "description": "Array of tag names to categorize the entity",
                },
                "properties": {"type": "object", "description": "Optional custom properties as key-value pairs"},
                "parent_id": {
                    "type": "string",
                    "description": "Optional UUID of an existing entity to link the new entity to",
                },
                "relationship_type": {
                    "type": "string",
                    "description": "Predicate for the link to parent_id (e.g. 'part_of')",
                },
            },
            "required": ["name", "tags"],
        },
    },
    {
        "name": "get_entity",
        "description": "Retrieve an entity by its ID",
        "inputSchema": {
            "type": "object",
            "properties": {
                "id": {"type": "string", "description": "The UUID of the entity to retrieve"},
            },
            "required": ["id"],
        },
    },
    {
        "name": "update_entity",
        "description": "Update an existing entity's name, description, tags, or properties",
        "inputSchema": {
            "type": "object",
            "properties": {
                "id": {"type": "string", "description": "The UUID of the entity to update"},
                "name": {"type": "string", "description": "The updated name of the entity"},
                "description": {"type": "string", "description": "The updated description of the entity"},
                "tags": {"type": "array", "items": {"type": "string"}, "description": "Updated array of tag names"},
                "properties": {"type": "object", "description": "Updated custom properties"},
            },
            "required": ["id"],
        },
    },
    {
        "name": "delete_entity",
        "description": "Delete an entity from the knowledge base",
        "inputSchema": {
            "type": "object",
            "properties": {
                "id": {"type": "string", "description": "The UUID of the entity to delete"},
            },
            "required": ["id"],
        },
    },
    {
        "name": "list_entities",
        "description": "List entities with optional filtering by tags, pagination support",
        "inputSchema": {
            "type": "object",
            "properties": {
                "limit": {
                    "type": "integer",
                    "description": "Maximum number of entities to return (default: 50)",
                    "default": 50,
                },
                "offset": {
                    "type": "integer",
                    "description": "Number of entities to skip (default: 0)",
                    "default": 0,
                },
                "tags": {
                    "type": "array",
                    "items": {"type": "string"},
                    "description": "Filter entities by tags (all tags must match)",
                },
            },
        },
    },
    {
        "name": "search_entities",
        "description": "Perform semantic search on the knowledge base using natural language query",
        "inputSchema": {
            "type": "object",
            "properties": {
                "query": {"type": "string", "description": "Natural language search query"},
                "limit": {
                    "type": "integer",
                    "description": "Maximum number of results to return (default: 10)",
                    "default": 10,
                },
            },
            "required": ["query"],
        },
    },
    {
        "name": "create_relationship",
        "description": "Create a directed relationship between two entities",
        "inputSchema": {
            "type": "object",
            "properties": {
                "source_id": {"type": "string", "description": "The UUID of the source entity"},
                "target_id": {"type": "string", "description": "The UUID of the target entity"},
                "predicate": {
                    "type": "string",
                    "description": "Relationship type (e.g. 'depends_on', 'part_of')",
                },
                "bidirectional": {
                    "type": "boolean",
                    "description": "Whether the relationship applies in both directions (default: false)",
                    "default": False,
                },
                "properties": {"type": "object", "description": "Optional custom properties as key-value pairs"},
            },
            "required": ["source_id", "target_id", "predicate"],
        },
    },
    {
        "name": "get_relationship",
        "description": "Retrieve a relationship by its ID",
        "inputSchema": {
            "type": "object",
            "properties": {
                "id": {"type": "string", "description": "The UUID of the relationship to retrieve"},
            },
            "required": ["id"],
        },
    },
    {
        "name": "update_relationship",
        "description": "Update an existing relationship's predicate, direction, or properties",
        "inputSchema": {
            "type": "object",
            "properties": {
                "id": {"type": "string", "description": "The UUID of the relationship to update"},
                "predicate": {"type": "string", "description": "The updated relationship type"},
                "bidirectional": {"type": "boolean", "description": "The updated direction flag"},
                "properties": {"type": "object", "description": "Updated custom properties"},
            },
            "required": ["id"],
        },
    },
    {
        "name": "delete_relationship",
        "description": "Delete a relationship from the knowledge base",
        "inputSchema": {
            "type": "object",
            "properties": {
                "id": {"type": "string", "description": "The UUID of the relationship to delete"},
            },
            "required": ["id"],
        },
    },
    {
        "name": "list_entity_relationships",
        "description": "List all relationships in which an entity takes part",
        "inputSchema": {
            "type": "object",
            "properties": {
                "entity_id": {"type": "string", "description": "The UUID of the entity"},
            },
            "required": ["entity_id"],
        },
    },
)


def get_tool_names() -> list[str]:
    """Names of all advertised tools, in catalog order."""
    return [schema["name"] for schema in TOOL_SCHEMAS]
