"""Static OpenAPI metadata for the public routes.

Route handlers unpack these declarations into their decorators; nothing here
runs per request.
"""

from items_api.models.item import Item, Message

OPENAPI_TAGS = [
    {
        'name': 'items',
        'description': 'Items stored as a single JSON document on the server.',
    },
    {
        'name': 'health',
        'description': 'Service liveness.',
    },
]

API_DESCRIPTION = (
    'Minimal CRUD-style API over a flat collection of items. '
    'The full collection is read from disk on every request and rewritten after every create.'
)

ROUTE_DOCS = {
    'list_items': {
        'summary': 'Get all items',
        'responses': {200: {'model': list[Item], 'description': 'A list of items.'}},
    },
    'get_item': {
        'summary': 'Get a single item by ID',
        'responses': {
            200: {'model': Item, 'description': 'The requested item.'},
            404: {'model': Message, 'description': 'Item not found.'},
        },
    },
    'create_item': {
        'summary': 'Create a new item',
        'description': 'Any `id` in the request body is replaced by a generated one.',
        'responses': {201: {'model': Item, 'description': 'The newly created item.'}},
    },
    'health_check': {
        'summary': 'Health check',
        'response_description': 'Always `ok` while the process is serving.',
    },
}
