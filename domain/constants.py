"""
This module contains centralized constants used throughout the application,
ensuring a single source of truth for option lists, field names and messages.
"""

import os

# Gender identity options offered in the form selector
GENDER_OTHER = "Other"
GENDER_OPTIONS = ("Male", "Female", "Non-binary", "Prefer not to say", GENDER_OTHER)

# Brazilian federative units (UF), in the order shown in the state selector
UFS = (
    "AC", "AL", "AP", "AM", "BA", "CE", "DF", "ES", "GO", "MA", "MT", "MS", "MG", "PA",
    "PB", "PR", "PE", "PI", "RJ", "RN", "RS", "RO", "RR", "SC", "SP", "SE", "TO",
)

# Editable form fields; also used as keys of the validation error mapping
FIELD_NAME = "name"
FIELD_EMAIL = "email"
FIELD_GENDER = "gender_selection"
FIELD_GENDER_OTHER = "gender_other"
FIELD_POSTAL_CODE = "postal_code"
FIELD_STATE = "selected_state"

EDITABLE_FIELDS = (
    FIELD_NAME, FIELD_EMAIL, FIELD_GENDER, FIELD_GENDER_OTHER, FIELD_POSTAL_CODE, FIELD_STATE,
)

# Validation messages (submit)
MSG_NAME_REQUIRED = "name is required"
MSG_EMAIL_INVALID = "enter a valid email"
MSG_GENDER_REQUIRED = "select a gender identity"
MSG_GENDER_OTHER_REQUIRED = "specify your gender identity"
MSG_CEP_FORMAT = "postal code must be 8 digits"
MSG_CEP_NOT_LOOKED_UP = "look up a valid postal code before confirming"
MSG_STATE_REQUIRED = "select a state"

# Lookup messages (postal code field)
MSG_LOOKUP_FORMAT = "must be 8 digits"
MSG_LOOKUP_NOT_FOUND = "not found"
MSG_LOOKUP_FAILED = "lookup failed, retry"

# --- Runtime configuration (environment overridable) ---

VIACEP_BASE_URL = os.getenv("VIACEP_BASE_URL", "https://viacep.com.br").rstrip("/")
CEP_LOOKUP_TIMEOUT = float(os.getenv("CEP_LOOKUP_TIMEOUT", "10"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
