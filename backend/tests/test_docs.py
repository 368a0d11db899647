"""
Tests for the generated API documentation
"""


def test_swagger_ui_is_served(client):
    response = client.get('/api-docs')

    assert response.status_code == 200
    assert 'swagger-ui' in response.text


def test_openapi_describes_item_routes(client):
    schema = client.get('/openapi.json').json()

    assert schema['info']['title'] == 'Items API'
    assert schema['info']['version'] == '1.0.0'

    assert set(schema['paths']['/items']) == {'get', 'post'}
    assert schema['paths']['/items']['get']['summary'] == 'Get all items'
    assert schema['paths']['/items']['post']['summary'] == 'Create a new item'
    assert '201' in schema['paths']['/items']['post']['responses']

    get_item = schema['paths']['/items/{item_id}']['get']
    assert get_item['summary'] == 'Get a single item by ID'
    assert get_item['responses']['404']['content']['application/json']['schema'] == {
        '$ref': '#/components/schemas/Message'
    }


def test_openapi_hides_trailing_slash_aliases(client):
    schema = client.get('/openapi.json').json()

    assert '/items/' not in schema['paths']


def test_openapi_documents_success_bodies_as_items(client):
    paths = client.get('/openapi.json').json()['paths']
    item_ref = {'$ref': '#/components/schemas/Item'}

    list_schema = paths['/items']['get']['responses']['200']['content']['application/json']['schema']
    assert list_schema['type'] == 'array'
    assert list_schema['items'] == item_ref

    get_schema = paths['/items/{item_id}']['get']['responses']['200']['content']['application/json']['schema']
    assert get_schema == item_ref

    create_schema = paths['/items']['post']['responses']['201']['content']['application/json']['schema']
    assert create_schema == item_ref


def test_item_schema_lists_id_and_name(client):
    schemas = client.get('/openapi.json').json()['components']['schemas']

    assert {'id', 'name'} <= set(schemas['Item']['properties'])
    assert schemas['Item']['required'] == ['id']
