"""
Clients API router.
Admin-only CRUD for client companies.
"""

from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.middleware.auth import require_admin
from app.models.client import Client
from app.models.user import User
from app.schemas.developer import ClientCreate, ClientResponse, ClientUpdate
from app.services.lookups import apply_updates, ensure_id_free, get_or_404

router = APIRouter()


@router.get("/clients", response_model=List[ClientResponse])
async def get_clients(
    db: AsyncSession = Depends(get_db),
    admin: User = Depends(require_admin),
):
    result = await db.execute(select(Client).order_by(Client.created_at.desc()))
    return result.scalars().all()


@router.post("/clients", response_model=ClientResponse, status_code=201)
async def create_client(
    data: ClientCreate,
    db: AsyncSession = Depends(get_db),
    admin: User = Depends(require_admin),
):
    await ensure_id_free(db, Client, data.id, "Client")
    if data.primary_contact_user_id is not None:
        await get_or_404(db, User, data.primary_contact_user_id, "User")

    client = Client(**data.model_dump(exclude_none=True))
    db.add(client)
    await db.commit()
    await db.refresh(client)
    return client


@router.put("/clients/{client_id}", response_model=ClientResponse)
async def update_client(
    client_id: str,
    data: ClientUpdate,
    db: AsyncSession = Depends(get_db),
    admin: User = Depends(require_admin),
):
    client = await get_or_404(db, Client, client_id, "Client")
    if data.primary_contact_user_id is not None:
        await get_or_404(db, User, data.primary_contact_user_id, "User")

    apply_updates(client, data)
    await db.commit()
    await db.refresh(client)
    return client


@router.delete("/clients/{client_id}")
async def delete_client(
    client_id: str,
    db: AsyncSession = Depends(get_db),
    admin: User = Depends(require_admin),
):
    """Delete a client together with its engagements."""
    client = await get_or_404(db, Client, client_id, "Client")
    await db.delete(client)
    await db.commit()
    return {"success": True}
