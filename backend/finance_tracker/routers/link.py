"""Account-link flow router.

The client drives one link session per user. Without a Plaid-issued link
token the server simulates the provider and adds a Demo Bank account after a
short delay. With a ready token the client opens Plaid Link itself and posts
the provider callbacks to the ``/success``, ``/exit`` and ``/events`` routes.
"""

from fastapi import APIRouter, Depends, status

from finance_tracker.dependencies import get_current_user
from finance_tracker.schemas.account import LinkedAccountRecord
from finance_tracker.schemas.common import SuccessResponse
from finance_tracker.schemas.link import (
    LinkEventRequest,
    LinkExitRequest,
    LinkSessionRequest,
    LinkSessionResponse,
    LinkSuccessRequest,
)
from finance_tracker.services.link_flow import LinkFlowController
from finance_tracker.services.link_sessions import LinkSessionRegistry, get_link_registry


router = APIRouter(prefix="/link", tags=["Account Linking"])


def _session_response(controller: LinkFlowController) -> LinkSessionResponse:
    session = controller.session
    return LinkSessionResponse(
        state=controller.state,
        mode=session.mode if session else None,
        link_token=session.token if session else None,
        ready=session.ready if session else False,
        pending=controller.pending,
        view=controller.view(),
    )


@router.post("/session", response_model=LinkSessionResponse, status_code=status.HTTP_202_ACCEPTED)
async def start_link_session(
    request: LinkSessionRequest,
    user: dict = Depends(get_current_user),
    registry: LinkSessionRegistry = Depends(get_link_registry),
):
    """
    Start connecting a bank account.

    If an attempt is already pending it is returned unchanged.
    """
    controller = registry.start(user["id"], request)
    return _session_response(controller)


@router.get("/session", response_model=LinkSessionResponse)
async def get_link_session(
    user: dict = Depends(get_current_user),
    registry: LinkSessionRegistry = Depends(get_link_registry),
):
    """Current link state for the connect control."""
    controller = registry.get(user["id"]) or LinkFlowController()
    return _session_response(controller)


@router.post("/session/success", response_model=LinkedAccountRecord, status_code=status.HTTP_201_CREATED)
async def link_success(
    request: LinkSuccessRequest,
    user: dict = Depends(get_current_user),
    registry: LinkSessionRegistry = Depends(get_link_registry),
):
    """Provider success callback. Adds the linked account."""
    return registry.complete(user["id"], request.public_token, request.metadata)


@router.post("/session/exit", response_model=LinkSessionResponse)
async def link_exit(
    request: LinkExitRequest,
    user: dict = Depends(get_current_user),
    registry: LinkSessionRegistry = Depends(get_link_registry),
):
    """Provider exit callback. The user abandoned the flow."""
    controller = registry.cancel(user["id"], request.error, request.metadata)
    return _session_response(controller)


@router.post("/session/events", response_model=SuccessResponse)
async def link_event(
    request: LinkEventRequest,
    user: dict = Depends(get_current_user),
    registry: LinkSessionRegistry = Depends(get_link_registry),
):
    """Provider lifecycle event."""
    registry.record_event(user["id"], request.event_name, request.metadata)
    return SuccessResponse(message="Event recorded")


@router.delete("/session", status_code=status.HTTP_204_NO_CONTENT)
async def discard_link_session(
    user: dict = Depends(get_current_user),
    registry: LinkSessionRegistry = Depends(get_link_registry),
):
    """Tear down the link controller. A pending demo link never completes."""
    registry.discard(user["id"])
