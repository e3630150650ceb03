"""Application state for a contacts UI, held explicitly instead of in a shared global."""

from dataclasses import dataclass, field

from contactkeeper.schemas.contact import ContactRead


@dataclass
class ContactState:
    """
    The contact list a client is showing, plus what is selected and filtered.

    Create one and hand it to whatever renders or edits contacts; every change
    goes through the methods below.
    """

    contacts: list[ContactRead] = field(default_factory=list)
    current: ContactRead | None = None
    filtered: list[ContactRead] | None = None
    filter_text: str = ""
    error: str | None = None

    def load(self, contacts: list[ContactRead]) -> None:
        """Replace the list, e.g. with ContactKeeperClient.list_contacts()."""
        self.contacts = list(contacts)
        self.error = None
        self._refilter()

    def add(self, contact: ContactRead) -> None:
        self.contacts.insert(0, contact)
        self._refilter()

    def update(self, contact: ContactRead) -> None:
        self.contacts = [contact if c.id == contact.id else c for c in self.contacts]
        if self.current is not None and self.current.id == contact.id:
            self.current = contact
        self._refilter()

    def delete(self, contact_id: int) -> None:
        self.contacts = [c for c in self.contacts if c.id != contact_id]
        if self.current is not None and self.current.id == contact_id:
            self.current = None
        self._refilter()

    def set_current(self, contact: ContactRead) -> None:
        """Mark a contact as being edited."""
        self.current = contact

    def clear_current(self) -> None:
        self.current = None

    def filter(self, text: str) -> list[ContactRead]:
        """Keep contacts whose name or email contains text (case-insensitive)."""
        self.filter_text = text.strip()
        self._refilter()
        return self.visible()

    def clear_filter(self) -> None:
        self.filter_text = ""
        self.filtered = None

    def set_error(self, message: str | None) -> None:
        self.error = message

    def visible(self) -> list[ContactRead]:
        """Contacts to display: the filtered view when a filter is active."""
        return self.filtered if self.filtered is not None else list(self.contacts)

    def _refilter(self) -> None:
        if not self.filter_text:
            self.filtered = None
            return
        needle = self.filter_text.lower()
        self.filtered = [
            c
            for c in self.contacts
            if needle in c.name.lower() or needle in (c.email or "").lower()
        ]
