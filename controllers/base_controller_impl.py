"""Base controller implementation with FastAPI dependency injection."""
import logging
from typing import Any, Callable, Dict, List, Optional, Set, Type, Union

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from starlette.responses import Response

from config.database import get_db
from controllers.base_controller import BaseController
from schemas.base_schema import BaseSchema
from services.base_service import BaseService

logger = logging.getLogger(__name__)


class BaseControllerImpl(BaseController):
    """
    Base controller implementation using FastAPI dependency injection.

    This class creates standard CRUD endpoints and properly manages database sessions.
    """

    def __init__(
        self,
        schema: Type[BaseSchema],
        service_factory: Optional[Callable[[Session], BaseService]] = None,
        tags: List[str] = None,
        exclude_on_get: Union[Set[str], Dict[str, Any]] = None,
        service_dependency: Optional[Callable[..., BaseService]] = None,
    ):
        """
        Initialize the controller with dependency injection support.

        Args:
            schema: The Pydantic schema class for validation
            service_factory: A callable that creates a service instance given a DB session
            tags: Optional list of tags for API documentation
            exclude_on_get: A set or dict of field names to exclude from the response on get requests
            service_dependency: A FastAPI dependency returning the service, used instead of
                service_factory when the service needs more than a DB session
        """
        self.schema = schema
        self.service_factory = service_factory
        self.router = APIRouter(tags=tags or [])
        self.exclude_on_get = exclude_on_get

        if service_dependency is None:
            def service_dependency(db: Session = Depends(get_db)) -> BaseService:
                return self.service_factory(db)
        self.service_dependency = service_dependency

        self._register_routes()
        logger.debug(f"{type(self).__name__}: Registered {len(self.router.routes)} routes.")

    def _register_routes(self):
        """Register all CRUD routes with proper dependency injection."""
        self._register_get_all()
        self._register_get_one()
        self._register_create()
        self._register_update()
        self._register_delete()

    def _register_get_all(self):
        @self.router.get(
            "/",
            response_model=List[self.schema],
            status_code=status.HTTP_200_OK,
            response_model_exclude=self.exclude_on_get,
        )
        async def get_all(skip: int = 0, limit: int = 100, service: BaseService = Depends(self.service_dependency)):
            """Get all records with pagination."""
            return service.get_all(skip=skip, limit=limit)

    def _register_get_one(self):
        @self.router.get(
            "/{id_key}",
            response_model=self.schema,
            status_code=status.HTTP_200_OK,
            response_model_exclude=self.exclude_on_get,
        )
        async def get_one(id_key: int, service: BaseService = Depends(self.service_dependency)):
            """Get one record by ID."""
            return service.get_one(id_key)

    def _register_create(self):
        @self.router.post("/", response_model=self.schema, status_code=status.HTTP_201_CREATED)
        async def create(schema_in: self.schema, service: BaseService = Depends(self.service_dependency)):
            """Create a new record."""
            try:
                return service.save(schema_in)
            except ValueError as e:
                raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    def _register_update(self):
        @self.router.put("/{id_key}", response_model=self.schema, status_code=status.HTTP_200_OK)
        async def update(
            id_key: int,
            schema_in: self.schema,
            service: BaseService = Depends(self.service_dependency)
        ):
            """Update an existing record."""
            try:
                return service.update(id_key, schema_in)
            except ValueError as e:
                raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    def _register_delete(self):
        @self.router.delete("/{id_key}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
        async def delete(id_key: int, service: BaseService = Depends(self.service_dependency)):
            """Delete a record."""
            service.delete(id_key)
            return Response(status_code=status.HTTP_204_NO_CONTENT)
