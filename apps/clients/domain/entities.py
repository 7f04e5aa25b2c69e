# apps/clients/domain/entities.py
from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import List, Optional

from apps.clients.domain.phones import clamp_primary_index


class ClientStatus(str, Enum):
    STARTED = 'started'
    ACTIVE = 'active'
    ON_ACTION = 'onaction'
    CLOSED = 'closed'
    DEAD = 'dead'


@dataclass
class ClientEntity:
    id: Optional[int]
    business_name: str
    manager_name: str
    place: str
    first_visit: date
    next_visit: date
    phone_numbers: List[str] = field(default_factory=list)
    primary_phone_index: int = 0
    status: ClientStatus = ClientStatus.STARTED
    deal: Optional[Decimal] = None
    description: str = ""

    # created_at to jedyne pole, które czyta silnik statystyk
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @property
    def primary_phone(self) -> Optional[str]:
        if not self.phone_numbers:
            return None
        # Indeks mógł zostać zmieniony poza formularzem (np. w adminie)
        return self.phone_numbers[clamp_primary_index(self.primary_phone_index, len(self.phone_numbers))]

    def is_due_for_call(self, today: date) -> bool:
        return self.status != ClientStatus.DEAD and self.next_visit <= today
