"""Account-link flow controller.

Drives one user's attempt to connect an external financial account. When a
real provider token is available and the provider is ready, the attempt is
delegated to the provider and completed by its callbacks. Otherwise the
controller simulates the provider: after a fixed delay it reports a success
for a demo institution.

State machine::

    IDLE --start()--> PENDING --on_success()--> IDLE
                              --on_exit()-----> IDLE

The controller never touches the caller's account list. ``on_success``
returns the new record and the caller decides where it goes.
"""

import asyncio
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Callable, Protocol

from finance_tracker.logging_config import get_logger
from finance_tracker.schemas.account import LinkedAccountRecord
from finance_tracker.schemas.link import (
    ButtonVariant,
    LinkButtonView,
    LinkMetadata,
    LinkMode,
    LinkState,
)
from finance_tracker.services.accounts import build_linked_account


logger = get_logger("link_flow")

DEMO_LINK_TOKEN = "link-sandbox-abc123"
DEMO_PUBLIC_TOKEN = "demo_public_token_12345"
DEMO_LINK_DELAY_SECONDS = 0.5

CONNECT_LABEL = "Connect Bank Account"
CONNECTING_LABEL = "Connecting to Demo Bank..."


def demo_metadata() -> LinkMetadata:
    """Metadata reported by the simulated provider."""
    return LinkMetadata.model_validate({
        "institution": {
            "name": "Demo Bank",
            "institution_id": "ins_demo123",
        },
        "accounts": [
            {
                "id": "acc_demo123",
                "name": "Demo Checking",
                "mask": "1234",
                "type": "depository",
                "subtype": "checking",
            }
        ],
    })


class LinkProvider(Protocol):
    """The linking widget the controller delegates to."""

    @property
    def ready(self) -> bool:
        ...

    def open(self) -> None:
        ...


SuccessCallback = Callable[[str, LinkMetadata], Any]
ExitCallback = Callable[[], Any]


@dataclass
class LinkSession:
    """One in-flight link attempt."""

    token: str
    ready: bool
    mode: LinkMode
    pending: bool = True
    started_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


class LinkFlowController:
    """State holder for the connect-account control."""

    def __init__(
        self,
        on_success: SuccessCallback | None = None,
        on_exit: ExitCallback | None = None,
        link_token: str | None = None,
        provider: LinkProvider | None = None,
        is_loading: bool = False,
        variant: ButtonVariant = ButtonVariant.DEFAULT,
        delay: float = DEMO_LINK_DELAY_SECONDS,
        demo_link_token: str = DEMO_LINK_TOKEN,
    ):
        self._on_success = on_success
        self._on_exit = on_exit
        self.link_token = link_token
        self.provider = provider
        self.is_loading = is_loading
        self.variant = ButtonVariant(variant)
        self.delay = delay
        self.demo_link_token = demo_link_token

        self._session: LinkSession | None = None
        self._task: asyncio.Task | None = None

    def configure(
        self,
        link_token: str | None = None,
        provider: LinkProvider | None = None,
        is_loading: bool = False,
        variant: ButtonVariant = ButtonVariant.DEFAULT,
    ) -> None:
        """Update caller inputs. Ignored while an attempt is pending."""
        if self.pending:
            return
        self.link_token = link_token
        self.provider = provider
        self.is_loading = is_loading
        self.variant = ButtonVariant(variant)

    @property
    def token(self) -> str:
        return self.link_token or self.demo_link_token

    @property
    def session(self) -> LinkSession | None:
        return self._session

    @property
    def pending(self) -> bool:
        return self._session is not None and self._session.pending

    @property
    def state(self) -> LinkState:
        return LinkState.PENDING if self.pending else LinkState.IDLE

    def start(self) -> asyncio.Task | None:
        """
        Begin a link attempt.

        Returns:
            The scheduled simulated completion, or None when the attempt was
            handed to the provider or another attempt is already pending.
        """
        if self.pending:
            logger.debug("Link attempt already pending, ignoring start")
            return None

        provider_ready = self.provider is not None and self.provider.ready

        if self.link_token and provider_ready:
            self._session = LinkSession(
                token=self.token,
                ready=True,
                mode=LinkMode.PROVIDER,
            )
            logger.info("Opening link provider")
            try:
                self.provider.open()
            except Exception:
                self._session = None
                raise
            return None

        loop = asyncio.get_running_loop()
        logger.info("No ready provider, simulating link success")
        self._session = LinkSession(
            token=self.token,
            ready=provider_ready,
            mode=LinkMode.SIMULATED,
        )
        self._task = loop.create_task(self._complete_simulation())
        return self._task

    async def _complete_simulation(self) -> LinkedAccountRecord:
        await asyncio.sleep(self.delay)
        self._task = None
        return self.on_success(DEMO_PUBLIC_TOKEN, demo_metadata())

    def on_success(
        self,
        public_token: str,
        metadata: LinkMetadata | dict | None = None,
    ) -> LinkedAccountRecord:
        """
        Handle a successful link.

        Builds the account record, clears the session, then calls the caller's
        success callback with the raw token and metadata.

        Returns:
            The new record, for the caller to append to its account list.
        """
        if metadata is None:
            metadata = LinkMetadata()
        elif isinstance(metadata, dict):
            metadata = LinkMetadata.model_validate(metadata)

        self._cancel_task()
        record = build_linked_account(metadata)
        self._session = None

        logger.info(
            "Link succeeded for %s (account %s)",
            record.institution,
            record.id,
        )
        if self._on_success is not None:
            self._on_success(public_token, metadata)
        return record

    def on_exit(self, error: Any = None, metadata: Any = None) -> None:
        """Handle the user abandoning the flow. No record is created."""
        self._cancel_task()
        self._session = None

        if error:
            logger.info("Link exited with error: %s", error)
        else:
            logger.info("Link exited by user")
        if self._on_exit is not None:
            self._on_exit()

    def on_event(self, event_name: str, metadata: Any = None) -> None:
        logger.debug("Link event %s: %s", event_name, metadata)

    def close(self) -> None:
        """Tear down: drop the session and cancel any scheduled completion."""
        if self._task is not None:
            logger.info("Cancelling pending simulated link")
        self._cancel_task()
        self._session = None

    def view(self) -> LinkButtonView:
        """Describe how the connect control should render."""
        simulating = (
            self._session is not None and self._session.mode is LinkMode.SIMULATED
        )
        return LinkButtonView(
            label=CONNECTING_LABEL if simulating else CONNECT_LABEL,
            disabled=self.pending or self.is_loading,
            variant=self.variant,
            is_loading=self.is_loading,
        )

    def _cancel_task(self) -> None:
        if self._task is not None and not self._task.done():
            self._task.cancel()
        self._task = None
