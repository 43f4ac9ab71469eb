"""Plaid integration router."""

from fastapi import APIRouter, Depends, HTTPException, status

from finance_tracker.database import Database, get_db
from finance_tracker.dependencies import get_current_user
from finance_tracker.schemas.plaid import (
    LinkTokenResponse,
    ExchangeTokenRequest,
    ExchangeTokenResponse,
    PlaidItemResponse,
)
from finance_tracker.services import plaid_service
from finance_tracker.services.link_flow import DEMO_PUBLIC_TOKEN
from finance_tracker.utils.encryption import encrypt_token


router = APIRouter(prefix="/plaid", tags=["Plaid"])


@router.post("/create-link-token", response_model=LinkTokenResponse)
async def create_link_token(
    user: dict = Depends(get_current_user),
    db: Database = Depends(get_db),
):
    """
    Create a Plaid Link token for initializing the Link flow.

    The token is remembered so a later link session using it can open the
    real provider instead of the demo.
    """
    result = plaid_service.create_link_token(user["id"])
    db.save_link_token(user["id"], result["link_token"], result["expiration"])

    return LinkTokenResponse(
        link_token=result["link_token"],
        expiration=result["expiration"],
    )


@router.post("/exchange-token", response_model=ExchangeTokenResponse)
async def exchange_token(
    request: ExchangeTokenRequest,
    user: dict = Depends(get_current_user),
    db: Database = Depends(get_db),
):
    """
    Exchange a Plaid public token for an access token.

    Stores the resulting Plaid item with its access token encrypted.
    """
    if request.public_token == DEMO_PUBLIC_TOKEN:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Demo public tokens cannot be exchanged",
        )

    result = plaid_service.exchange_public_token(request.public_token)

    item = db.create_plaid_item({
        "user_id": user["id"],
        "plaid_item_id": result["item_id"],
        "access_token": encrypt_token(result["access_token"]),
        "institution_id": request.institution_id,
        "institution_name": request.institution_name,
        "status": "active",
    })

    return ExchangeTokenResponse(
        item_id=item["id"],
        institution_id=request.institution_id,
        institution_name=request.institution_name,
    )


@router.get("/items", response_model=list[PlaidItemResponse])
async def list_items(
    user: dict = Depends(get_current_user),
    db: Database = Depends(get_db),
):
    """List all Plaid items for the current user."""
    items = db.get_user_plaid_items(user["id"])
    return [
        PlaidItemResponse(
            id=item["id"],
            plaid_item_id=item["plaid_item_id"],
            institution_id=item.get("institution_id"),
            institution_name=item.get("institution_name"),
            status=item["status"],
            created_at=item["created_at"],
            updated_at=item["updated_at"],
        )
        for item in items
    ]
