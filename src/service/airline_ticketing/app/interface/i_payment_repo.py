from src.service.airline_ticketing.app.interface.i_repository import IRepository
from src.service.airline_ticketing.domain.entity.payment_entity import Payment


class IPaymentRepo(IRepository[Payment]):
    pass
