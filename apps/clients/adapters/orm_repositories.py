# apps/clients/adapters/orm_repositories.py
from datetime import date, timedelta
from typing import List
from apps.clients.domain.entities import ClientEntity, ClientStatus
from apps.clients.ports.repositories import IClientRepository
from apps.clients.models import Client as ClientModel

ONE_DAY = timedelta(days=1)


class DjangoClientRepository(IClientRepository):
    def to_entity(self, model: ClientModel) -> ClientEntity:
        """Konwertuje Model Django -> Czystą Encję."""
        return ClientEntity(
            id=model.id,
            business_name=model.business_name,
            manager_name=model.manager_name,
            place=model.place,
            first_visit=model.first_visit,
            next_visit=model.next_visit,
            phone_numbers=list(model.phone_numbers or []),
            primary_phone_index=model.primary_phone_index,
            status=ClientStatus(model.status),
            deal=model.deal,
            description=model.description,
            created_at=model.created_at,
            updated_at=model.updated_at
        )

    def list_for_user(self, user_id: int) -> List[ClientEntity]:
        qs = ClientModel.objects.filter(user_id=user_id).order_by('created_at', 'id')
        return [self.to_entity(c) for c in qs]

    def list_created_between(self, user_id: int, start: date, end: date) -> List[ClientEntity]:
        # Baza liczy __date w swojej strefie, a dzień wyznacza silnik w strefie trackera.
        # Poszerzamy okno o dzień z każdej strony, dokładne cięcie robi DailyAggregator.
        qs = ClientModel.objects.filter(
            user_id=user_id,
            created_at__date__gte=max(start, date.min + ONE_DAY) - ONE_DAY,
            created_at__date__lte=min(end, date.max - ONE_DAY) + ONE_DAY
        ).order_by('created_at', 'id')
        return [self.to_entity(c) for c in qs]

    def list_due_for_call(self, user_id: int, today: date) -> List[ClientEntity]:
        qs = ClientModel.objects.filter(
            user_id=user_id,
            next_visit__lte=today
        ).exclude(status=ClientStatus.DEAD.value).order_by('next_visit', 'id')
        return [self.to_entity(c) for c in qs]
