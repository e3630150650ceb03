"""Python client for the Contact Keeper API and the state it feeds."""

from contactkeeper.client.api import ApiClientError, ContactKeeperClient
from contactkeeper.client.state import ContactState

__all__ = ["ApiClientError", "ContactKeeperClient", "ContactState"]
