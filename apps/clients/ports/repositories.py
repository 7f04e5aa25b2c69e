# apps/clients/ports/repositories.py
from abc import ABC, abstractmethod
from datetime import date
from typing import List
from apps.clients.domain.entities import ClientEntity


class IClientRepository(ABC):
    @abstractmethod
    def list_for_user(self, user_id: int) -> List[ClientEntity]:
        """Wszyscy klienci użytkownika (źródło zdarzeń dla statystyk)."""
        pass

    @abstractmethod
    def list_created_between(self, user_id: int, start: date, end: date) -> List[ClientEntity]:
        """Klienci dodani w zakresie dni (przybliżenie po stronie bazy, dokładny podział robi silnik)."""
        pass

    @abstractmethod
    def list_due_for_call(self, user_id: int, today: date) -> List[ClientEntity]:
        pass
