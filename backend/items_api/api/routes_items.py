from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from items_api.api.docs import ROUTE_DOCS
from items_api.models.item import ItemCreate
from items_api.services.item_repository import ItemRepository, get_item_repository

router = APIRouter(prefix='/items', tags=['items'])

# Stored records are returned as they are on disk; the Item schema only documents them.


@router.get('', **ROUTE_DOCS['list_items'])
@router.get('/', include_in_schema=False)
async def list_items(repository: ItemRepository = Depends(get_item_repository)):
    return await repository.list_items()


@router.get('/{item_id}', **ROUTE_DOCS['get_item'])
async def get_item(item_id: str, repository: ItemRepository = Depends(get_item_repository)):
    item = await repository.get_item(item_id)
    if item is None:
        return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={'message': 'Item not found'})
    return item


@router.post('', status_code=status.HTTP_201_CREATED, **ROUTE_DOCS['create_item'])
@router.post('/', status_code=status.HTTP_201_CREATED, include_in_schema=False)
async def create_item(payload: ItemCreate, repository: ItemRepository = Depends(get_item_repository)):
    return await repository.create_item(payload.model_dump(exclude_unset=True))
