class CustomBaseError(Exception):
    """Base class for all custom exceptions - controls logging behavior in @Logger.io"""

    def __init__(self, message: str, status_code: int = 500) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class DomainError(CustomBaseError):
    def __init__(self, message: str, status_code: int = 400) -> None:
        super().__init__(message, status_code)


class NotFoundError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 404)


class ConflictError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 409)


# Validation
class InvalidSeatError(DomainError):
    pass


class InvalidSeatClassError(DomainError):
    pass


class TicketNotFoundError(NotFoundError):
    def __init__(self, message: str = 'Ticket not found') -> None:
        super().__init__(message)


class TripNotFoundError(NotFoundError):
    def __init__(self, message: str = 'Trip not found') -> None:
        super().__init__(message)


class PendingChangeNotFoundError(NotFoundError):
    def __init__(self, message: str = 'Pending ticket change not found or expired') -> None:
        super().__init__(message)


# Contention
class SeatTakenError(ConflictError):
    def __init__(self, message: str = 'Seat is already taken') -> None:
        super().__init__(message)


class SoldOutError(ConflictError):
    def __init__(self, message: str = 'No seats left in the requested class') -> None:
        super().__init__(message)


# Policy
class ChangeNotEligibleError(DomainError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 422)


class CheckInNotAllowedError(DomainError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 422)


# Transactional
class TicketChangeFailedError(CustomBaseError):
    def __init__(
        self, message: str = 'Ticket change failed; nothing was changed. Please try again.'
    ) -> None:
        super().__init__(message, 500)


class SeatAssignmentFailedError(CustomBaseError):
    def __init__(
        self, message: str = 'Seat assignment failed; nothing was changed. Please try again.'
    ) -> None:
        super().__init__(message, 500)


class PnrGenerationError(CustomBaseError):
    def __init__(self, message: str = 'Could not generate a unique PNR') -> None:
        super().__init__(message, 500)


# Payment gateway
class PaymentGatewayError(CustomBaseError):
    def __init__(self, message: str, status_code: int = 502) -> None:
        super().__init__(message, status_code)


class PaymentInitiationError(PaymentGatewayError):
    def __init__(self, message: str = 'Could not start the payment, please try again') -> None:
        super().__init__(message)


class PaymentVerificationError(PaymentGatewayError):
    def __init__(self, message: str = 'Payment callback signature is invalid') -> None:
        super().__init__(message)


class PaymentDeclinedError(PaymentGatewayError):
    def __init__(self, message: str = 'Payment was not completed') -> None:
        super().__init__(message, 402)
