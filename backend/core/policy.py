"""Per-contact authorization decisions and the edit status rule."""

import enum

from core.auth import AuthenticatedUser
from core.models import Contact, ContactStatus


class ContactOperation(str, enum.Enum):
    CREATE = "Create"
    READ = "Read"
    UPDATE = "Update"
    DELETE = "Delete"
    APPROVE = "Approve"


def is_owner(principal: AuthenticatedUser, contact: Contact) -> bool:
    return contact.owner_id == principal.id


def decide(
    principal: AuthenticatedUser | None,
    contact: Contact,
    operation: ContactOperation,
) -> bool:
    """Return True if ``principal`` may perform ``operation`` on ``contact``.

    Anonymous principals (None) are denied everything. Approvers may do
    anything; owners may read, update and delete their own contacts but never
    approve them; everyone else may only read approved contacts.
    """
    if principal is None:
        return False

    if operation == ContactOperation.CREATE:
        return True

    if operation == ContactOperation.APPROVE:
        return principal.is_approver

    if operation == ContactOperation.READ:
        return (
            contact.status == ContactStatus.APPROVED
            or is_owner(principal, contact)
            or principal.is_approver
        )

    if operation in (ContactOperation.UPDATE, ContactOperation.DELETE):
        return is_owner(principal, contact) or principal.is_approver

    return False


def status_after_edit(principal: AuthenticatedUser | None, contact: Contact) -> ContactStatus:
    """Status a contact should carry once ``principal``'s edit is committed.

    An approved contact edited by someone who cannot approve goes back to
    Submitted; any other edit keeps the current status.
    """
    if contact.status == ContactStatus.APPROVED and not decide(
        principal, contact, ContactOperation.APPROVE
    ):
        return ContactStatus.SUBMITTED
    return contact.status
