import streamlit as st
from domain.constants import (
    GENDER_OPTIONS, GENDER_OTHER, UFS,
    FIELD_NAME, FIELD_EMAIL, FIELD_GENDER, FIELD_GENDER_OTHER, FIELD_POSTAL_CODE, FIELD_STATE,
)
from services.cep import ViaCepClient
from services.form import FormController, LOOKUP_FOUND
from ui.components import inject_base_css, field_error, summary_card
from utils.cep import only_digits

# Widget session keys; the controller is the source of truth and these are
# re-synced from it at the top of every run.
WIDGET_KEYS = {
    FIELD_NAME: "cep_form_name",
    FIELD_EMAIL: "cep_form_email",
    FIELD_GENDER: "cep_form_gender",
    FIELD_GENDER_OTHER: "cep_form_gender_other",
    FIELD_POSTAL_CODE: "cep_form_postal_code",
    FIELD_STATE: "cep_form_state",
}

PLACEHOLDER = "Select"


def get_controller() -> FormController:
    if 'cep_form' not in st.session_state:
        st.session_state.cep_form = FormController(ViaCepClient())
    return st.session_state.cep_form


def _sync_widgets(ctrl: FormController):
    for field, key in WIDGET_KEYS.items():
        st.session_state[key] = getattr(ctrl.state, field)


def _on_change(field: str):
    value = st.session_state[WIDGET_KEYS[field]]
    if field == FIELD_POSTAL_CODE:
        # pasted "01310-100" style input keeps only its digits
        value = only_digits(value)
    get_controller().update_field(field, value)


def _on_lookup():
    st.session_state.cep_lookup_outcome = get_controller().lookup_postal_code()


def _option_label(value):
    return PLACEHOLDER if value is None else value


def view():
    """Renders the registration form with CEP lookup and the confirmation summary."""
    inject_base_css()
    st.header("CEP lookup")

    ctrl = get_controller()
    _sync_widgets(ctrl)
    state = ctrl.state

    st.text_input("Name", key=WIDGET_KEYS[FIELD_NAME], on_change=_on_change, args=(FIELD_NAME,))
    field_error(ctrl.error_for(FIELD_NAME))

    st.text_input("Email", key=WIDGET_KEYS[FIELD_EMAIL], on_change=_on_change, args=(FIELD_EMAIL,))
    field_error(ctrl.error_for(FIELD_EMAIL))

    st.selectbox("Gender identity", [None, *GENDER_OPTIONS], format_func=_option_label,
                 key=WIDGET_KEYS[FIELD_GENDER], on_change=_on_change, args=(FIELD_GENDER,))
    field_error(ctrl.error_for(FIELD_GENDER))

    if state.gender_selection == GENDER_OTHER:
        st.text_input("Specify", key=WIDGET_KEYS[FIELD_GENDER_OTHER],
                      on_change=_on_change, args=(FIELD_GENDER_OTHER,))
        field_error(ctrl.error_for(FIELD_GENDER_OTHER))

    st.text_input("CEP", key=WIDGET_KEYS[FIELD_POSTAL_CODE], placeholder="Type the CEP (8 digits)",
                  max_chars=9, on_change=_on_change, args=(FIELD_POSTAL_CODE,))
    field_error(ctrl.error_for(FIELD_POSTAL_CODE))
    st.button("🔎 Search", key="cep_form_lookup", on_click=_on_lookup)
    if st.session_state.pop('cep_lookup_outcome', None) == LOOKUP_FOUND:
        st.toast("Address found")

    addr = state.address_lookup
    st.text_input("Street", value=addr.street if addr else '', disabled=True)
    st.text_input("Neighborhood", value=addr.neighborhood if addr else '', disabled=True)
    st.text_input("City", value=addr.city if addr else '', disabled=True)

    st.selectbox("State", [None, *UFS], format_func=_option_label,
                 key=WIDGET_KEYS[FIELD_STATE], on_change=_on_change, args=(FIELD_STATE,))
    field_error(ctrl.error_for(FIELD_STATE))

    st.button("✔ Confirm", key="cep_form_submit", on_click=ctrl.submit, type="primary")

    if state.summary_visible:
        summary_card(ctrl.summary_rows(), on_close=ctrl.dismiss_summary)
