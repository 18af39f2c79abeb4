from ..models import Contact


def added(contact: Contact) -> str:
    return f"Contact '{contact.full_name}' was successfully added."


def updated(contact: Contact) -> str:
    return f"Contact '{contact.full_name}' was successfully updated."


def deleted(full_name: str) -> str:
    return f"Contact '{full_name}' was successfully deleted."
