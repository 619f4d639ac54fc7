"""Form controller: field state, validation and the CEP lookup flow.

The view layer only reads ``controller.state`` and calls the operations below;
nothing here imports streamlit so the whole flow is testable with a fake
lookup client.
"""
from __future__ import annotations
import logging
from typing import Any, Dict, List, Optional, Tuple

from domain.constants import (
    GENDER_OPTIONS, GENDER_OTHER, UFS, EDITABLE_FIELDS,
    FIELD_NAME, FIELD_EMAIL, FIELD_GENDER, FIELD_GENDER_OTHER, FIELD_POSTAL_CODE, FIELD_STATE,
    MSG_NAME_REQUIRED, MSG_EMAIL_INVALID, MSG_GENDER_REQUIRED, MSG_GENDER_OTHER_REQUIRED,
    MSG_CEP_FORMAT, MSG_CEP_NOT_LOOKED_UP, MSG_STATE_REQUIRED,
    MSG_LOOKUP_FORMAT, MSG_LOOKUP_NOT_FOUND, MSG_LOOKUP_FAILED,
)
from domain.models import FormState
from services.errors import PostalLookupError, UnknownFieldError
from utils.cep import is_valid_cep, format_cep

logger = logging.getLogger(__name__)

# lookup_postal_code() outcomes
LOOKUP_INVALID = "invalid"
LOOKUP_FOUND = "found"
LOOKUP_NOT_FOUND = "not_found"
LOOKUP_FAILED = "failed"


def validate(state: FormState) -> Dict[str, str]:
    """Run every submit rule against state and collect all failures.

    Rules are independent; the second postal code rule shares the first one's
    slot and wins when both fire.
    """
    errors: Dict[str, str] = {}
    if not state.name.strip():
        errors[FIELD_NAME] = MSG_NAME_REQUIRED
    if '@' not in state.email or '.' not in state.email:
        errors[FIELD_EMAIL] = MSG_EMAIL_INVALID
    if state.gender_selection is None:
        errors[FIELD_GENDER] = MSG_GENDER_REQUIRED
    if state.gender_selection == GENDER_OTHER and not state.gender_other.strip():
        errors[FIELD_GENDER_OTHER] = MSG_GENDER_OTHER_REQUIRED
    if not is_valid_cep(state.postal_code):
        errors[FIELD_POSTAL_CODE] = MSG_CEP_FORMAT
    if state.address_lookup is None:
        errors[FIELD_POSTAL_CODE] = MSG_CEP_NOT_LOOKED_UP
    if state.selected_state is None:
        errors[FIELD_STATE] = MSG_STATE_REQUIRED
    return errors


class FormController:
    def __init__(self, lookup_client, state: Optional[FormState] = None):
        self.client = lookup_client
        self.state = state if state is not None else FormState()

    # --- user input ---

    def update_field(self, field: str, value: Any) -> None:
        if field not in EDITABLE_FIELDS:
            raise UnknownFieldError(field)
        if field == FIELD_GENDER:
            if value is not None and value not in GENDER_OPTIONS:
                raise ValueError(f"unknown gender option: {value!r}")
            if value != GENDER_OTHER:
                self.state.gender_other = ''
        elif field == FIELD_STATE:
            if value is not None and value not in UFS:
                raise ValueError(f"unknown state code: {value!r}")
        else:
            value = '' if value is None else str(value)
        setattr(self.state, field, value)

    # --- postal code lookup ---

    def lookup_postal_code(self) -> str:
        s = self.state
        cep = s.postal_code
        if not is_valid_cep(cep):
            s.validation_errors[FIELD_POSTAL_CODE] = MSG_LOOKUP_FORMAT
            return LOOKUP_INVALID

        logger.info("Looking up CEP %s", cep)
        try:
            record = self.client.lookup(cep)
        except PostalLookupError:
            s.validation_errors[FIELD_POSTAL_CODE] = MSG_LOOKUP_FAILED
            return LOOKUP_FAILED

        if record is None:
            logger.info("CEP %s not found", cep)
            s.address_lookup = None
            s.selected_state = None
            s.validation_errors[FIELD_POSTAL_CODE] = MSG_LOOKUP_NOT_FOUND
            return LOOKUP_NOT_FOUND

        logger.info("CEP %s resolved to %s/%s", cep, record.city, record.state)
        s.address_lookup = record
        # Auto-fill the state; a manual pick made afterwards stands until the next lookup.
        s.selected_state = record.state or None
        s.validation_errors.pop(FIELD_POSTAL_CODE, None)
        return LOOKUP_FOUND

    # --- confirmation ---

    def submit(self) -> bool:
        errors = validate(self.state)
        self.state.validation_errors = errors
        logger.debug("Form validated with %d error(s): %s", len(errors), sorted(errors))
        if not errors:
            self.state.summary_visible = True
        return not errors

    def dismiss_summary(self) -> None:
        self.state.summary_visible = False

    # --- read-only helpers for the view ---

    def error_for(self, field: str) -> Optional[str]:
        return self.state.validation_errors.get(field)

    def gender_display(self) -> str:
        s = self.state
        if s.gender_selection == GENDER_OTHER:
            return s.gender_other
        return s.gender_selection or ''

    def summary_rows(self) -> List[Tuple[str, str]]:
        s = self.state
        addr = s.address_lookup
        return [
            ("Name", s.name),
            ("Email", s.email),
            ("Gender identity", self.gender_display()),
            ("Postal code", format_cep(s.postal_code)),
            ("Street", addr.street if addr else ''),
            ("Neighborhood", addr.neighborhood if addr else ''),
            ("City", addr.city if addr else ''),
            ("State", s.selected_state or ''),
        ]
