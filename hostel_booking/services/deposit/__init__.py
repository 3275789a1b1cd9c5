from hostel_booking.services.deposit.deposit_service import DepositService

__all__ = ["DepositService"]
