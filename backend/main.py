import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.exc import SQLAlchemyError

from backend.core import config
from backend.core.error_handlers import register_error_handlers
from backend.database import Base, engine, ensure_sweet_schema
from backend.models import sweet, user  # noqa: F401
from backend.routes import auth_routes, inventory_routes, sweet_routes

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s %(levelname)s %(name)s: %(message)s',
)

config.validate_runtime_config()

app = FastAPI(title='Sweet Shop API')

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=['*'],
    allow_headers=['*'],
)

register_error_handlers(app)

logger = logging.getLogger(__name__)


@app.on_event('startup')
def initialize_database() -> None:
    try:
        Base.metadata.create_all(bind=engine)
        ensure_sweet_schema()
    except SQLAlchemyError:
        logger.exception('Database initialization failed. Check DATABASE_URL.')


@app.get('/health')
def health():
    return {'status': 'ok', 'message': 'Sweet Shop API is running'}


app.include_router(auth_routes.router, prefix='/api/auth')
app.include_router(sweet_routes.router, prefix='/api/sweets')
app.include_router(inventory_routes.router, prefix='/api/sweets')
