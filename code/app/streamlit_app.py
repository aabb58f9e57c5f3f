# streamlit_app.py
import os
import sys

import streamlit as st

# Ensure the code/ directory is on sys.path so `app` and `insurance` import when Streamlit runs this file directly.
PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from app.core.config import COVERAGE_PEOPLE  # noqa: E402
from app.core.models import PersonRequest  # noqa: E402
from app.core.pipeline import run_person  # noqa: E402
from app.core.shell_state import PensionLevelState  # noqa: E402
from app.core.tools import field_text, pension_label, share_caption  # noqa: E402
from insurance.pension import pension_share  # noqa: E402

st.set_page_config(page_title="Doporučené pojistné částky", layout="wide")
st.title("Doporučené pojistné částky")


def person_inputs(index: int) -> PersonRequest:
    with st.sidebar:
        st.header(f"Osoba {index + 1}")
        income = st.number_input("Čistý měsíční příjem", min_value=1.0, value=30000.0, step=1000.0, key=f"income_{index}")
        other_income = st.number_input("Ostatní příjmy domácnosti", min_value=0.0, value=0.0, step=1000.0, key=f"other_{index}")
        is_osvc = st.checkbox("OSVČ", value=False, key=f"osvc_{index}")
        expenses = st.number_input("Měsíční výdaje", min_value=0.0, value=20000.0, step=1000.0, key=f"expenses_{index}")
        passive_income = st.number_input("Pasivní příjem", min_value=0.0, value=0.0, step=500.0, key=f"passive_{index}")
        st.markdown("---")
    return PersonRequest(
        title=f"Osoba {index + 1}",
        income=income,
        other_income=other_income,
        is_osvc=is_osvc,
        expenses=expenses,
        passive_income=passive_income,
    )


def pension_state(index: int, income: float) -> PensionLevelState:
    # Seeded on first render only; later income edits do not touch it.
    key = f"pensions_{index}"
    if key not in st.session_state:
        st.session_state[key] = PensionLevelState.from_income(income)
    return st.session_state[key]


def render_person(index: int, column) -> None:
    request = person_inputs(index)
    state = pension_state(index, request.income)

    with column:
        header = f"### {request.title}"
        if request.is_osvc:
            header += "  `OSVČ`"
        st.markdown(header)

        for level_index, level in enumerate(state.snapshot()):
            text = st.text_input(pension_label(level_index), value=field_text(level), key=f"pension_{index}_{level_index}")
            value = state.set_level(level_index, text)
            st.caption(share_caption(pension_share(value, request.income)))

        response = run_person(request.model_copy(update={"pension_levels": list(state.snapshot())}))
        for row in response.rows:
            st.markdown(f"**{row.title}**  \n{row.value}")
            for detail in row.details:
                st.caption(detail)


columns = st.columns(COVERAGE_PEOPLE)
for i, col in enumerate(columns):
    render_person(i, col)
