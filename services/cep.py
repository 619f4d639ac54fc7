"""CEP (Brazilian postal code) lookup against the public ViaCEP service.

Any object exposing ``lookup(cep) -> Optional[AddressRecord]`` can stand in for
ViaCepClient (tests inject an in-memory fake). Contract:
- returns an AddressRecord when the CEP exists,
- returns None when the service reports it as unknown,
- raises PostalLookupError on any transport failure.
"""
from __future__ import annotations
import logging
from typing import Optional

import requests

from domain.constants import VIACEP_BASE_URL, CEP_LOOKUP_TIMEOUT
from domain.models import AddressRecord, address_from_viacep
from services.errors import PostalLookupError

logger = logging.getLogger(__name__)


def _is_not_found(payload) -> bool:
    # ViaCEP answers 200 {"erro": true}; older deployments send the string "true"
    return isinstance(payload, dict) and payload.get('erro') in (True, 'true')


class ViaCepClient:
    def __init__(self, base_url: str = VIACEP_BASE_URL, timeout: float = CEP_LOOKUP_TIMEOUT,
                 session: Optional[requests.Session] = None):
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self.session = session

    def url_for(self, cep: str) -> str:
        return f"{self.base_url}/ws/{cep}/json/"

    def lookup(self, cep: str) -> Optional[AddressRecord]:
        url = self.url_for(cep)
        getter = self.session.get if self.session is not None else requests.get
        try:
            r = getter(url, timeout=self.timeout)
            r.raise_for_status()
            payload = r.json()
        except requests.RequestException as exc:
            logger.warning("CEP %s lookup failed: %s", cep, exc)
            raise PostalLookupError(str(exc)) from exc
        except ValueError as exc:
            logger.warning("CEP %s lookup returned a non-JSON body", cep)
            raise PostalLookupError("invalid response body") from exc

        if _is_not_found(payload):
            return None
        if not isinstance(payload, dict):
            raise PostalLookupError("unexpected response shape")
        return address_from_viacep(payload)
