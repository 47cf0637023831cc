from typing import Any

from src.service.airline_ticketing.app.interface.i_payment_repo import IPaymentRepo
from src.service.airline_ticketing.domain.entity.payment_entity import Payment
from src.service.airline_ticketing.domain.enum.payment_method import PaymentMethod
from src.service.airline_ticketing.domain.enum.payment_status import PaymentStatus
from src.service.airline_ticketing.driven_adapter.model.payment_model import PaymentModel
from src.service.airline_ticketing.driven_adapter.repo.sqlalchemy_repo import (
    SqlAlchemyRepo,
    as_utc,
)


class PaymentRepoImpl(SqlAlchemyRepo[PaymentModel, Payment], IPaymentRepo):
    model = PaymentModel

    def _to_entity(self, db_payment: PaymentModel) -> Payment:
        return Payment(
            id=db_payment.id,
            ticket_id=db_payment.ticket_id,
            method=PaymentMethod(db_payment.method),
            transaction_code=db_payment.transaction_code,
            amount=db_payment.amount,
            payment_date=as_utc(db_payment.payment_date),  # type: ignore[arg-type]
            status=PaymentStatus(db_payment.status),
        )

    def _to_values(self, entity: Payment) -> dict[str, Any]:
        return {
            'ticket_id': entity.ticket_id,
            'method': entity.method.value,
            'transaction_code': entity.transaction_code,
            'amount': entity.amount,
            'payment_date': entity.payment_date,
            'status': entity.status.value,
        }
