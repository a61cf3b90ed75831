from typing import List, Optional

from fastapi import APIRouter, Depends, Response, status
from pydantic import BaseModel
from sqlalchemy.orm import Session

from supply_api.dependencies import get_db
from supply_api.services.crud_service import CrudService


def add_crud_routes(
    router: APIRouter,
    service: CrudService,
    *,
    read_schema: type[BaseModel],
    update_schema: type[BaseModel],
    create_schema: Optional[type[BaseModel]] = None,
) -> APIRouter:
    """Attach list/get/create/update/delete routes for one entity to ``router``."""

    @router.get("", response_model=List[read_schema])
    def list_entities(db: Session = Depends(get_db)):
        return service.list_all(db)

    @router.get("/{entity_id}", response_model=read_schema)
    def get_entity(entity_id: int, db: Session = Depends(get_db)):
        return service.get(db, entity_id)

    if create_schema is not None:
        @router.post("", response_model=read_schema, status_code=status.HTTP_201_CREATED)
        def create_entity(payload: create_schema, db: Session = Depends(get_db)):
            return service.create(db, payload.model_dump())

    @router.put("/{entity_id}", response_model=read_schema)
    def update_entity(entity_id: int, payload: update_schema, db: Session = Depends(get_db)):
        return service.update(db, entity_id, payload.model_dump(exclude_unset=True))

    @router.delete("/{entity_id}", status_code=status.HTTP_204_NO_CONTENT)
    def delete_entity(entity_id: int, db: Session = Depends(get_db)):
        service.delete(db, entity_id)
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    return router


__all__ = ["add_crud_routes"]
