import logging
from dataclasses import asdict
from typing import Any

from litestar import Controller, Response, get, post
from litestar.exceptions import NotFoundException
from litestar.response import Redirect

from core.auth import AuthenticatedUser, ChallengeException
from core.models import (
    Contact,
    ContactEditViewModel,
    ContactStatus,
    contact_to_view_model,
    parse_contact_form,
    view_model_to_contact,
)
from core.policy import ContactOperation, decide, status_after_edit
from core.repository import ContactRepository
from core.responses import ColumnMeta, FormResponse, MultiRowResponse, SingleRowResponse


logger = logging.getLogger(__name__)

INDEX_PATH = "/Contacts"


# Column definitions for the contact list and detail views
CONTACT_COLUMNS = [
    ColumnMeta(key="contact_id", label="ID", type="number"),
    ColumnMeta(key="name", label="Name", type="string"),
    ColumnMeta(key="address", label="Address", type="string"),
    ColumnMeta(key="city", label="City", type="string"),
    ColumnMeta(key="state", label="State", type="string"),
    ColumnMeta(key="zip", label="Zip", type="string"),
    ColumnMeta(key="email", label="Email", type="email"),
    ColumnMeta(key="status", label="Status", type="status"),
    ColumnMeta(key="owner_id", label="Owner", type="string"),
]

# Column definitions for the create/edit form
CONTACT_FORM_COLUMNS = [
    ColumnMeta(key="contact_id", label="ID", type="number"),
    ColumnMeta(key="name", label="Name", type="string"),
    ColumnMeta(key="address", label="Address", type="string"),
    ColumnMeta(key="city", label="City", type="string"),
    ColumnMeta(key="state", label="State", type="string"),
    ColumnMeta(key="zip", label="Zip", type="string"),
    ColumnMeta(key="email", label="Email", type="email"),
]


def _form(view_model: ContactEditViewModel, errors: dict[str, list[str]] | None = None) -> FormResponse:
    return FormResponse(columns=CONTACT_FORM_COLUMNS, data=asdict(view_model), errors=errors or {})


def _invalid_form(view_model: ContactEditViewModel, errors: dict[str, list[str]]) -> Response:
    """Send the submitted form back with its field errors."""
    return Response(_form(view_model, errors), status_code=400)


def _redirect_to_index() -> Redirect:
    return Redirect(path=INDEX_PATH, status_code=303)


async def _get_contact_or_404(contacts: ContactRepository, contact_id: int) -> Contact:
    contact = await contacts.get_by_id(contact_id)
    if contact is None:
        raise NotFoundException(detail="Contact not found")
    return contact


def _authorize(
    principal: AuthenticatedUser, contact: Contact, operation: ContactOperation
) -> None:
    """Raise the challenge response if the policy denies ``operation``."""
    if not decide(principal, contact, operation):
        logger.info(
            "Denied %s on contact %s for user %s",
            operation.value,
            contact.contact_id,
            principal.username,
        )
        raise ChallengeException(detail=f"Not permitted to {operation.value.lower()} this contact")


class ContactsController(Controller):
    path = INDEX_PATH
    tags = ["contacts"]

    @get()
    async def index(
        self,
        contacts: ContactRepository,
        current_user: AuthenticatedUser,
    ) -> MultiRowResponse:
        """List the contacts the current user may read."""
        rows = [
            contact.to_row()
            for contact in await contacts.list_all()
            if decide(current_user, contact, ContactOperation.READ)
        ]
        return MultiRowResponse(columns=CONTACT_COLUMNS, data=rows)

    @get("/Details/{contact_id:int}")
    async def details(
        self,
        contacts: ContactRepository,
        current_user: AuthenticatedUser,
        contact_id: int,
    ) -> SingleRowResponse:
        """Show a single contact."""
        contact = await _get_contact_or_404(contacts, contact_id)
        _authorize(current_user, contact, ContactOperation.READ)
        return SingleRowResponse(columns=CONTACT_COLUMNS, data=contact.to_row())

    @get("/Create")
    async def create_form(self, current_user: AuthenticatedUser) -> FormResponse:
        """Blank create form."""
        return _form(ContactEditViewModel())

    @post("/Create")
    async def create(
        self,
        contacts: ContactRepository,
        current_user: AuthenticatedUser,
        data: dict[str, Any],
    ) -> Response:
        """Submit a new contact. It always starts out as Submitted."""
        form, errors = parse_contact_form(data)
        if errors:
            return _invalid_form(form, errors)

        contact = view_model_to_contact(
            form, Contact(owner_id=current_user.id, status=ContactStatus.SUBMITTED)
        )
        _authorize(current_user, contact, ContactOperation.CREATE)

        contact = await contacts.insert(contact)
        logger.info("User %s submitted contact %s", current_user.username, contact.contact_id)
        return _redirect_to_index()

    @get("/Edit/{contact_id:int}")
    async def edit_form(
        self,
        contacts: ContactRepository,
        current_user: AuthenticatedUser,
        contact_id: int,
    ) -> FormResponse:
        """Edit form pre-populated from the stored contact."""
        contact = await _get_contact_or_404(contacts, contact_id)
        _authorize(current_user, contact, ContactOperation.UPDATE)
        return _form(contact_to_view_model(contact))

    @post("/Edit/{contact_id:int}")
    async def edit(
        self,
        contacts: ContactRepository,
        current_user: AuthenticatedUser,
        contact_id: int,
        data: dict[str, Any],
    ) -> Response:
        """Update a contact.

        An approved contact edited by a user who cannot approve goes back to
        Submitted for review.
        """
        form, errors = parse_contact_form(data, contact_id=contact_id)
        if errors:
            return _invalid_form(form, errors)

        contact = await _get_contact_or_404(contacts, contact_id)
        _authorize(current_user, contact, ContactOperation.UPDATE)

        contact = view_model_to_contact(form, contact)
        status = status_after_edit(current_user, contact)
        if status != contact.status:
            logger.info(
                "Contact %s edited by %s returns to %s",
                contact_id,
                current_user.username,
                status.value,
            )
            contact.status = status

        if not await contacts.update(contact):
            raise NotFoundException(detail="Contact not found")
        return _redirect_to_index()

    @get("/Delete/{contact_id:int}")
    async def delete_confirm(
        self,
        contacts: ContactRepository,
        current_user: AuthenticatedUser,
        contact_id: int,
    ) -> SingleRowResponse:
        """Delete confirmation."""
        contact = await _get_contact_or_404(contacts, contact_id)
        _authorize(current_user, contact, ContactOperation.DELETE)
        return SingleRowResponse(columns=CONTACT_COLUMNS, data=contact.to_row())

    @post("/Delete/{contact_id:int}")
    async def delete(
        self,
        contacts: ContactRepository,
        current_user: AuthenticatedUser,
        contact_id: int,
    ) -> Response:
        """Delete a contact. Existence is checked before authorization, as on GET."""
        contact = await _get_contact_or_404(contacts, contact_id)
        _authorize(current_user, contact, ContactOperation.DELETE)

        if not await contacts.delete(contact_id):
            raise NotFoundException(detail="Contact not found")
        logger.info("User %s deleted contact %s", current_user.username, contact_id)
        return _redirect_to_index()

    @post("/Approve/{contact_id:int}")
    async def approve(
        self,
        contacts: ContactRepository,
        current_user: AuthenticatedUser,
        contact_id: int,
    ) -> Response:
        """Approve a submitted contact. Requires the approver capability."""
        contact = await _get_contact_or_404(contacts, contact_id)
        _authorize(current_user, contact, ContactOperation.APPROVE)

        contact.status = ContactStatus.APPROVED
        if not await contacts.update(contact):
            raise NotFoundException(detail="Contact not found")
        logger.info("User %s approved contact %s", current_user.username, contact_id)
        return _redirect_to_index()
