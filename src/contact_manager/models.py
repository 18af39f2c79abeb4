from dataclasses import dataclass
from typing import Optional


@dataclass
class Contact:
    first_name: str = ""
    last_name: str = ""
    phone: str = ""
    email: str = ""
    organization: Optional[str] = None
    # assigned by ContactStore.add; 0 means "not stored yet"
    id: int = 0

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"
