from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ...settings import settings
from ..base import CURRENCY_RUB_ISO


class AdapterConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    merchant_id: str
    secret_key: str
    api_url: str = "https://securepay.tinkoff.ru/v2"
    default_currency: str = CURRENCY_RUB_ISO

    @classmethod
    def from_settings(cls) -> "AdapterConfig":
        return cls(
            merchant_id=settings.TINKOFF_MERCHANT_ID,
            secret_key=settings.TINKOFF_SECRET_KEY,
            api_url=settings.TINKOFF_API_URL,
            default_currency=settings.DEFAULT_CURRENCY,
        )

    @classmethod
    def coerce(cls, config: "AdapterConfig | Mapping[str, Any]") -> "AdapterConfig":
        # из словаря принимаем и ключи конфига модуля: merchantId/secretKey/apiUrl
        if isinstance(config, cls):
            return config
        data = dict(config)
        for legacy, key in (("merchantId", "merchant_id"), ("secretKey", "secret_key"), ("apiUrl", "api_url")):
            if legacy in data:
                data.setdefault(key, data.pop(legacy))
        return cls(**data)


class PaymentRequest(BaseModel):
    order_id: str
    payment_id: str
    amount: Decimal = Field(ge=0)
    currency: str
    success_url: str = ""
    fail_url: str = ""
    description: str = ""

    @field_validator("order_id", "payment_id", mode="before")
    @classmethod
    def _ids_as_str(cls, v: Any) -> Any:
        return str(v) if isinstance(v, int) else v

    @field_validator("amount", mode="before")
    @classmethod
    def _amount_from_text(cls, v: Any) -> Any:
        # float сначала в str, иначе 10.005 превращается в 10.00499999...
        return Decimal(str(v)) if isinstance(v, float) else v

    @field_validator("currency")
    @classmethod
    def _upper(cls, v: str) -> str:
        return v.strip().upper()

    def minor_units(self) -> int:
        """Сумма в копейках, половина округляется вверх."""
        return int((self.amount * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


class InitResponse(BaseModel):
    """Ответ метода Init. Неизвестные поля сохраняются."""
    model_config = ConfigDict(extra="allow")

    Success: bool = False
    ErrorCode: str = ""
    Message: Optional[str] = None
    Details: Optional[str] = None
    TerminalKey: Optional[str] = None
    Status: Optional[str] = None
    PaymentId: Optional[str] = None
    OrderId: Optional[str] = None
    Amount: Optional[int] = None
    PaymentURL: Optional[str] = None

    @field_validator("ErrorCode", "PaymentId", "OrderId", mode="before")
    @classmethod
    def _numbers_as_str(cls, v: Any) -> Any:
        return str(v) if isinstance(v, int) and not isinstance(v, bool) else v

    @property
    def is_ok(self) -> bool:
        return self.Success and self.ErrorCode in ("", "0")

    @property
    def error_text(self) -> str:
        if self.is_ok:
            return ""
        return self.Details or self.Message or f"Error code {self.ErrorCode or 'unknown'}"
