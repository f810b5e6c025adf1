from typing import Any, Mapping, Optional, Union

from .base import PayService
from .tinkoff.adapter import TinkoffAdapter
from .tinkoff.schemas import AdapterConfig

# Фабрики адаптеров: адаптер хранит последнее уведомление,
# поэтому на каждый платёжный поток создаём новый экземпляр
_registry = {
    "Tinkoff_Card": TinkoffAdapter,
}

# Алиасы имён провайдеров → канонические ключи реестра
_aliases = {
    "tinkoff": "Tinkoff_Card",
    "tinkoff_card": "Tinkoff_Card",
    "card": "Tinkoff_Card",
}

def get_provider_by_name(name: str | None, config: Union[AdapterConfig, Mapping[str, Any], None] = None) -> Optional[PayService]:
    if not name:
        return None
    key = _aliases.get(name.strip().lower(), name)
    factory = _registry.get(key)
    if factory is None:
        return None
    if config is None:
        return factory.from_settings()
    return factory(config)

def resolve_provider_by_payment_method(payment_method: str | None, config: Optional[Mapping[str, Any]] = None) -> Optional[PayService]:
    if not payment_method:
        return None
    pm = payment_method.strip().upper()
    if pm in {"CARD", "BANK_CARD"}:
        return get_provider_by_name("Tinkoff_Card", config)
    return None
