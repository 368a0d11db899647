import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from items_api.api.docs import API_DESCRIPTION, OPENAPI_TAGS, ROUTE_DOCS
from items_api.api.routes_items import router as items_router
from items_api.core.config import settings
from items_api.core.logging import configure_logging

configure_logging(settings.log_level)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_app: FastAPI):
    logger.info('Server is running on port %s, storing items in %s', settings.port, settings.data_file)
    yield


app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description=API_DESCRIPTION,
    openapi_tags=OPENAPI_TAGS,
    docs_url=settings.docs_url,
    redoc_url=None,
    debug=settings.debug,
    lifespan=lifespan,
)

# include routers
app.include_router(items_router)


@app.get('/healthz', tags=['health'], **ROUTE_DOCS['health_check'])
async def health_check():
    return 'ok'


if __name__ == '__main__':
    import uvicorn

    uvicorn.run('items_api.main:app', host=settings.host, port=settings.port, reload=settings.debug)
