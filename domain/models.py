from dataclasses import dataclass, field
from typing import Dict, Optional, Any


@dataclass(frozen=True)
class AddressRecord:
    street: str
    neighborhood: str
    city: str
    state: str  # UF, e.g. "SP"
    postal_code: str = ''  # formatted by the service, e.g. "01310-100"
    complement: str = ''


def address_from_viacep(d: Dict[str, Any]) -> AddressRecord:
    """Map a ViaCEP JSON payload to an AddressRecord, values copied verbatim."""
    def _s(key: str) -> str:
        value = d.get(key)
        return value if isinstance(value, str) else ''

    return AddressRecord(
        street=_s('logradouro'),
        neighborhood=_s('bairro'),
        city=_s('localidade'),
        state=_s('uf'),
        postal_code=_s('cep'),
        complement=_s('complemento'),
    )


@dataclass
class FormState:
    name: str = ''
    email: str = ''
    gender_selection: Optional[str] = None  # None = not selected yet
    gender_other: str = ''
    postal_code: str = ''
    address_lookup: Optional[AddressRecord] = None
    selected_state: Optional[str] = None
    validation_errors: Dict[str, str] = field(default_factory=dict)
    summary_visible: bool = False
