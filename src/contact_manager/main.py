import logging
import uuid
from typing import Dict, Optional

from fastapi import APIRouter, Depends, FastAPI, Form, HTTPException, Request
from fastapi.exception_handlers import http_exception_handler, request_validation_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.responses import RedirectResponse
from fastapi.templating import Jinja2Templates
from starlette.exceptions import HTTPException as StarletteHTTPException

from . import config
from .models import Contact
from .schemas import Contact as ContactOut, ContactCreate
from .services import flash, messages
from .store import ContactStore, get_store
from .validation import clean_contact_values, validate_contact

logger = logging.getLogger(__name__)

templates = Jinja2Templates(directory=config.TEMPLATE_DIR)

pages = APIRouter()
api = APIRouter(prefix="/api")


def _contact_form(
    first_name: str = Form(""),
    last_name: str = Form(""),
    phone: str = Form(""),
    email: str = Form(""),
    organization: str = Form(""),
) -> Dict[str, str]:
    return {
        "first_name": first_name,
        "last_name": last_name,
        "phone": phone,
        "email": email,
        "organization": organization,
    }


def _require_contact(store: ContactStore, contact_id: int) -> Contact:
    contact = store.get_by_id(contact_id)
    if contact is None:
        raise HTTPException(status_code=404, detail="Contact not found")
    return contact


def _redirect_with_message(message: str) -> RedirectResponse:
    response = RedirectResponse("/contacts", status_code=303)
    flash.set_flash(response, message)
    return response


def _render_form(request: Request, values, errors, contact_id: Optional[int] = None):
    return templates.TemplateResponse(
        request,
        "contacts/form.html",
        {"values": values, "errors": errors, "contact_id": contact_id},
    )


# --- pages ---


@pages.get("/")
def home(request: Request, store: ContactStore = Depends(get_store)):
    return templates.TemplateResponse(
        request,
        "home.html",
        {"contacts": store.list_all(), "contact_count": store.count()},
    )


@pages.get("/privacy")
def privacy(request: Request):
    return templates.TemplateResponse(request, "privacy.html", {})


@pages.get("/contacts")
def contact_index(request: Request, store: ContactStore = Depends(get_store)):
    message = flash.read_flash(request)
    response = templates.TemplateResponse(
        request,
        "contacts/index.html",
        {"contacts": store.list_all(), "message": message},
    )
    if message is not None:
        flash.clear_flash(response)
    return response


@pages.get("/contacts/add")
def add_form(request: Request):
    return _render_form(request, {}, {})


@pages.post("/contacts/add")
def add_submit(
    request: Request,
    values: Dict[str, str] = Depends(_contact_form),
    store: ContactStore = Depends(get_store),
):
    errors = validate_contact(values)
    if errors:
        logger.info("Rejected new contact: %s", ", ".join(sorted(errors)))
        return _render_form(request, values, errors)
    contact = store.add(Contact(**clean_contact_values(values)))
    return _redirect_with_message(messages.added(contact))


@pages.get("/contacts/{contact_id}")
def contact_details(request: Request, contact_id: int, store: ContactStore = Depends(get_store)):
    contact = _require_contact(store, contact_id)
    return templates.TemplateResponse(request, "contacts/details.html", {"contact": contact})


@pages.get("/contacts/{contact_id}/edit")
def edit_form(request: Request, contact_id: int, store: ContactStore = Depends(get_store)):
    contact = _require_contact(store, contact_id)
    values = {
        "first_name": contact.first_name,
        "last_name": contact.last_name,
        "phone": contact.phone,
        "email": contact.email,
        "organization": contact.organization or "",
    }
    return _render_form(request, values, {}, contact_id)


@pages.post("/contacts/{contact_id}/edit")
def edit_submit(
    request: Request,
    contact_id: int,
    values: Dict[str, str] = Depends(_contact_form),
    store: ContactStore = Depends(get_store),
):
    errors = validate_contact(values)
    if errors:
        logger.info("Rejected update of contact %s: %s", contact_id, ", ".join(sorted(errors)))
        return _render_form(request, values, errors, contact_id)
    contact = Contact(id=contact_id, **clean_contact_values(values))
    if not store.update(contact):
        raise HTTPException(status_code=404, detail="Contact not found")
    return _redirect_with_message(messages.updated(contact))


@pages.get("/contacts/{contact_id}/delete")
def delete_confirm(request: Request, contact_id: int, store: ContactStore = Depends(get_store)):
    contact = _require_contact(store, contact_id)
    return templates.TemplateResponse(request, "contacts/delete.html", {"contact": contact})


@pages.post("/contacts/{contact_id}/delete")
def delete_submit(contact_id: int, store: ContactStore = Depends(get_store)):
    contact = store.get_by_id(contact_id)
    if contact is None:
        return RedirectResponse("/contacts", status_code=303)
    store.delete(contact_id)
    return _redirect_with_message(messages.deleted(contact.full_name))


# --- json api ---


def _validated(payload: ContactCreate) -> Dict[str, Optional[str]]:
    values = payload.model_dump()
    errors = validate_contact(values)
    if errors:
        raise HTTPException(status_code=422, detail={"errors": errors})
    return clean_contact_values(values)


@api.get("/contacts", response_model=list[ContactOut])
def list_contacts(store: ContactStore = Depends(get_store)):
    return store.list_all()


@api.get("/contacts/{contact_id}", response_model=ContactOut)
def get_contact(contact_id: int, store: ContactStore = Depends(get_store)):
    return _require_contact(store, contact_id)


@api.post("/contacts", response_model=ContactOut, status_code=201)
def create_contact(contact: ContactCreate, store: ContactStore = Depends(get_store)):
    return store.add(Contact(**_validated(contact)))


@api.put("/contacts/{contact_id}", response_model=ContactOut)
def update_contact(contact_id: int, contact: ContactCreate, store: ContactStore = Depends(get_store)):
    updated = Contact(id=contact_id, **_validated(contact))
    if not store.update(updated):
        raise HTTPException(status_code=404, detail="Contact not found")
    return updated


@api.delete("/contacts/{contact_id}")
def delete_contact(contact_id: int, store: ContactStore = Depends(get_store)):
    if not store.delete(contact_id):
        raise HTTPException(status_code=404, detail="Contact not found")
    return {"ok": True}


def _is_json_path(request: Request) -> bool:
    path = request.url.path
    return path.startswith("/api/") or path == "/health"


def _render_error(request: Request, status_code: int, detail):
    return templates.TemplateResponse(
        request,
        "error.html",
        {
            "status_code": status_code,
            "detail": detail,
            "request_id": uuid.uuid4().hex,
        },
        status_code=status_code,
    )


async def _http_error(request: Request, exc: StarletteHTTPException):
    if _is_json_path(request):
        return await http_exception_handler(request, exc)
    return _render_error(request, exc.status_code, exc.detail)


async def _validation_error(request: Request, exc: RequestValidationError):
    if _is_json_path(request):
        return await request_validation_exception_handler(request, exc)
    # page routes only fail here on a malformed contact id in the path
    logger.info("Bad request on %s: %s", request.url.path, exc.errors())
    return _render_error(request, 404, "Contact not found")


def create_app(store: Optional[ContactStore] = None) -> FastAPI:
    logging.basicConfig(level=config.LOG_LEVEL)
    app = FastAPI(title=config.APP_TITLE)
    if store is None:
        store = ContactStore.with_sample_data() if config.SEED_SAMPLE_DATA else ContactStore()
    app.state.store = store

    @app.get("/health")
    def health():
        return {"status": "ok", "contacts": app.state.store.count()}

    app.add_exception_handler(StarletteHTTPException, _http_error)
    app.add_exception_handler(RequestValidationError, _validation_error)
    app.include_router(pages)
    app.include_router(api)
    logger.info("Contact store ready with %s contacts", store.count())
    return app


app = create_app()
