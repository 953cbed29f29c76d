"""
Ride Vehicle Editor - Action Registry

Named game actions. Executing an action encodes its arguments to a JSON
payload and delivers it to this participant and every connected peer, so all
of them apply the same change in the same order.
"""

import json
import logging
from collections import Counter
from typing import Any, Callable

LOGGER = logging.getLogger(__name__)


class ActionRegistry:
    """Registers action handlers and replicates executed actions to peers."""

    def __init__(self, name: str = "local"):
        self.name = name
        self.handlers: dict[str, Callable[[Any], None]] = {}
        self.decoders: dict[str, Callable[[dict], Any]] = {}
        self.peers: list["ActionRegistry"] = []
        self.executed: Counter = Counter()  # action name -> times executed here
        self.received: Counter = Counter()  # action name -> times applied here

    def register(
        self,
        action_id: str,
        handler: Callable[[Any], None],
        decoder: Callable[[dict], Any],
    ) -> Callable[[Any], None]:
        """Register an action and return a callable that executes it.

        Args:
            action_id: Unique action name shared by all participants
            handler: Applies decoded arguments to this participant's game
            decoder: Rebuilds arguments from a payload dict

        Raises:
            ValueError: if the action name is already registered
        """
        if action_id in self.handlers:
            raise ValueError(f"Action conflict: {action_id} is already registered")

        self.handlers[action_id] = handler
        self.decoders[action_id] = decoder
        return lambda args: self.execute(action_id, args)

    def connect(self, peer: "ActionRegistry"):
        """Link two participants so actions executed on either reach both."""
        if peer is self or peer in self.peers:
            return
        self.peers.append(peer)
        peer.peers.append(self)
        LOGGER.info("Participant %s connected to %s", self.name, peer.name)

    def is_multiplayer(self) -> bool:
        return len(self.peers) > 0

    def execute(self, action_id: str, args):
        """Encode arguments and apply them on every participant."""
        payload = json.dumps(args.to_payload())
        self.executed[action_id] += 1
        LOGGER.debug("%s executes %s: %s", self.name, action_id, payload)

        self.receive(action_id, payload)
        for peer in self.peers:
            peer.receive(action_id, payload)

    def receive(self, action_id: str, payload: str):
        """Apply an encoded action on this participant."""
        handler = self.handlers.get(action_id)
        if handler is None:
            LOGGER.warning("%s received unknown action %s", self.name, action_id)
            return

        args = self.decoders[action_id](json.loads(payload))
        self.received[action_id] += 1
        handler(args)
