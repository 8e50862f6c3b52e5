"""Click-to-reveal contact address shown on the about page."""

from enum import Enum


class ContactState(Enum):
    HIDDEN = 'hidden'
    REVEALED = 'revealed'


class ContactReveal:
    """
    Two-state toggle for an email address.

    The address stays hidden behind a placeholder label until ``reveal()`` is
    called; revealing is one-way.
    """

    PLACEHOLDER = 'Email'

    def __init__(self, email, state=ContactState.HIDDEN):
        self.email = email or ''
        self.state = state

    def reveal(self):
        self.state = ContactState.REVEALED
        return self

    @property
    def revealed(self):
        return self.state is ContactState.REVEALED

    @property
    def label(self):
        return self.email if self.revealed else self.PLACEHOLDER
