"""Per-user link controllers and the caller-side handling of their results."""

import asyncio
from functools import lru_cache, partial
from typing import Any

from finance_tracker.config import Settings, get_settings
from finance_tracker.database import Database, get_db
from finance_tracker.exceptions import LinkSessionNotFoundError
from finance_tracker.logging_config import get_logger
from finance_tracker.schemas.account import LinkedAccountRecord
from finance_tracker.schemas.link import LinkMetadata, LinkMode, LinkSessionRequest
from finance_tracker.schemas.notification import NotificationLevel
from finance_tracker.services.accounts import DEFAULT_INSTITUTION_NAME
from finance_tracker.services.link_flow import LinkFlowController
from finance_tracker.services.notifier import Notifier, get_notifier, notify_safely
from finance_tracker.services.plaid_service import PlaidLinkProvider


logger = get_logger("link_sessions")


class LinkSessionRegistry:
    """
    Owns one LinkFlowController per user.

    The registry plays the caller role for each controller: successful links
    are appended to the user's account book and both outcomes raise a
    notification.
    """

    def __init__(
        self,
        db: Database,
        notifier: Notifier | None,
        settings: Settings,
    ):
        self.db = db
        self.notifier = notifier
        self.settings = settings
        self._controllers: dict[str, LinkFlowController] = {}

    def get(self, user_id: str) -> LinkFlowController | None:
        return self._controllers.get(user_id)

    def controller_for(self, user_id: str) -> LinkFlowController:
        controller = self._controllers.get(user_id)
        if controller is None:
            controller = LinkFlowController(
                on_success=partial(self._handle_success, user_id),
                on_exit=partial(self._handle_exit, user_id),
                delay=self.settings.demo_link_delay_seconds,
                demo_link_token=self.settings.demo_link_token,
            )
            self._controllers[user_id] = controller
        return controller

    def start(self, user_id: str, request: LinkSessionRequest) -> LinkFlowController:
        """
        Start a link attempt for a user.

        A user with an attempt already pending gets the existing controller
        back untouched.
        """
        controller = self.controller_for(user_id)
        if controller.pending:
            return controller

        controller.configure(
            link_token=request.link_token,
            provider=self._provider_for(user_id, request.link_token),
            is_loading=request.is_loading,
            variant=request.variant,
        )
        task = controller.start()
        if task is not None:
            task.add_done_callback(partial(self._append_simulated, user_id))
        return controller

    def complete(
        self,
        user_id: str,
        public_token: str,
        metadata: LinkMetadata,
    ) -> LinkedAccountRecord:
        """Apply a provider success callback and store the new account."""
        controller = self.get(user_id)
        session = controller.session if controller else None
        if session is None or session.mode is not LinkMode.PROVIDER:
            raise LinkSessionNotFoundError("No link session is waiting for provider callbacks")

        record = controller.on_success(public_token, metadata)
        return self.db.get_account_book(user_id).append(record)

    def cancel(self, user_id: str, error: Any = None, metadata: Any = None) -> LinkFlowController:
        """Apply a provider exit callback."""
        controller = self.get(user_id)
        if controller is None or not controller.pending:
            raise LinkSessionNotFoundError("No link session in progress")

        controller.on_exit(error, metadata)
        return controller

    def record_event(self, user_id: str, event_name: str, metadata: Any = None) -> None:
        controller = self.get(user_id)
        if controller is None:
            raise LinkSessionNotFoundError("No link session in progress")
        controller.on_event(event_name, metadata)

    def discard(self, user_id: str) -> None:
        """Tear down a user's controller without firing callbacks."""
        controller = self._controllers.pop(user_id, None)
        if controller is not None:
            controller.close()

    def close_all(self) -> None:
        for user_id in list(self._controllers):
            self.discard(user_id)

    def _provider_for(self, user_id: str, link_token: str | None) -> PlaidLinkProvider | None:
        if not link_token:
            return None
        issued = self.db.get_link_token(user_id, link_token)
        return PlaidLinkProvider(link_token, issued["expiration"] if issued else None)

    def _append_simulated(self, user_id: str, task: asyncio.Task) -> None:
        if task.cancelled():
            return
        exc = task.exception()
        if exc is not None:
            logger.error("Simulated link failed for user %s", user_id, exc_info=exc)
            return
        self.db.get_account_book(user_id).append(task.result())

    def _handle_success(self, user_id: str, public_token: str, metadata: LinkMetadata) -> None:
        institution = metadata.institution_name or DEFAULT_INSTITUTION_NAME
        notify_safely(
            self.notifier,
            user_id,
            NotificationLevel.SUCCESS,
            f"Successfully connected to {institution}",
            "New account added to your dashboard",
        )

    def _handle_exit(self, user_id: str) -> None:
        notify_safely(
            self.notifier,
            user_id,
            NotificationLevel.INFO,
            "Connection cancelled",
            "You can connect your bank account later",
        )


@lru_cache
def get_link_registry() -> LinkSessionRegistry:
    """Get the process-wide link session registry."""
    return LinkSessionRegistry(get_db(), get_notifier(), get_settings())
