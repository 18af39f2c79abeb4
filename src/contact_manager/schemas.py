from pydantic import BaseModel, computed_field
from typing import Optional


class ContactBase(BaseModel):
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    organization: Optional[str] = None


class ContactCreate(ContactBase):
    # field rules live in validation.CONTACT_RULES so errors come back per field
    pass


class Contact(ContactBase):
    id: int
    # read straight off models.Contact; full_name is recomputed, never accepted as input
    model_config = {"from_attributes": True}

    @computed_field
    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"
