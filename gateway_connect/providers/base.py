from decimal import Decimal
from typing import Protocol, Optional, Any, Mapping, Union, runtime_checkable

CURRENCY_RUB_ISO = "RUB"

@runtime_checkable
class PayService(Protocol):
    name: str

    def create_payment(
        self,
        order_id: str,
        payment_id: str,
        amount: Union[Decimal, float, int, str],
        currency: Optional[str] = None,
        success_url: str = "",
        fail_url: str = "",
        description: str = "",
    ) -> str:
        ...

    # Никогда не бросает: битая подпись == False
    def validate(self, payload: Mapping[str, Any]) -> bool:
        ...

    def record_response(self, payload: Mapping[str, Any]) -> "PayService":
        ...

    def get_response_param(self, name: str, default: Any = "") -> Any:
        ...

    def get_order_id(self) -> str:
        ...

    def get_status(self) -> str:
        ...

    def is_success(self) -> bool:
        ...

    def get_transaction_id(self) -> str:
        ...

    def get_amount(self) -> Any:
        ...

    def get_error_code(self) -> Any:
        ...

    def get_pan(self) -> str:
        ...

    def get_date_time(self) -> str:
        ...

    def get_provider(self) -> str:
        ...
