"""
MedFlow — Web UI (Streamlit)

Майстер з п'яти етапів. Екран обирається за current_stage сесії,
весь стан живе на API сервері.

Запуск:
    streamlit run medflow/web_ui/app.py

    або:

    python scripts/run_web.py
"""

import streamlit as st
import sys
from pathlib import Path

# Додаємо корінь проекту (streamlit запускає файл як скрипт)
project_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(project_root))

from medflow.web_ui.client import APIError, MedFlowClient

STAGES = [
    ("patient-input", "Patient Info"),
    ("symptom-analysis", "Symptom Analysis"),
    ("knowledge-retrieval", "Knowledge Retrieval"),
    ("specialist-routing", "Specialist Routing"),
    ("final-diagnosis", "Diagnosis"),
]

URGENCY_BADGES = {
    "emergency": "🔴",
    "high": "🟠",
    "medium": "🟡",
    "low": "🟢",
}

client = MedFlowClient()


# ============================================================
# Стан сторінки
# ============================================================

def session() -> dict:
    return st.session_state.session_data


def session_id() -> str:
    return st.session_state.session_data["session_id"]


def store(state: dict) -> None:
    st.session_state.session_data = state


def call(fn, *args, **kwargs):
    """Виклик API; помилка показується замість toast"""
    try:
        return fn(*args, **kwargs)
    except APIError as e:
        st.error(e.detail)
        return None


def added_symptom_message(state: dict) -> str:
    """Текст підтвердження для останнього доданого симптому"""
    symptoms = state["patient_info"]["current_symptoms"]
    return f"Added symptom: {symptoms[-1]['name']}"


def ensure_session() -> None:
    if st.session_state.get("session_data") is None:
        store(client.create_session())
        st.session_state.stage_report = None
    else:
        try:
            store(client.get_session(session_id()))
        except APIError:
            # Сесія протухла на сервері
            store(client.create_session())
            st.session_state.stage_report = None


# ============================================================
# Header / progress / footer
# ============================================================

def render_header() -> None:
    st.title("🏥 MedFlow")
    st.caption("AI Workflow Orchestrator")


def render_progress() -> None:
    current = session()["current_stage"]
    position = [key for key, _ in STAGES].index(current)

    st.progress(position / (len(STAGES) - 1))

    cols = st.columns(len(STAGES))
    for i, (col, (_, label)) in enumerate(zip(cols, STAGES)):
        if i < position:
            col.markdown(f"✅ {label}")
        elif i == position:
            col.markdown(f"**▶️ {label}**")
        else:
            col.markdown(f"⚪ {label}")

    st.divider()


def render_footer() -> None:
    st.divider()
    st.caption(
        "MedFlow AI Workflow Orchestrator - For demonstration purposes only. "
        "Not for actual medical use. Consult healthcare professionals for medical advice."
    )


# ============================================================
# 1. Patient Info
# ============================================================

def render_patient_input() -> None:
    state = session()
    patient = state["patient_info"]

    st.subheader("📋 Patient Information")

    # Повідомлення з попереднього проходу (st.rerun скидає сторінку)
    flash = st.session_state.pop("flash", None)
    if flash:
        st.success(flash)

    col1, col2 = st.columns(2)
    with col1:
        age = st.number_input(
            "Age", min_value=0, max_value=120, value=patient["age"], step=1
        )
    with col2:
        genders = ["", "male", "female", "other"]
        gender = st.selectbox(
            "Gender",
            genders,
            index=genders.index(patient["gender"]),
            format_func=lambda g: g.capitalize() if g else "Select your gender",
        )

    if age != patient["age"] or gender != patient["gender"]:
        updated = call(client.update_patient, session_id(), age=int(age), gender=gender)
        if updated:
            store(updated)

    history = st.text_input(
        "Medical History (comma-separated)",
        value=", ".join(patient["medical_history"]),
        placeholder="e.g., Diabetes, High blood pressure, Previous surgeries",
    )

    st.markdown("### 🩺 Current Symptoms")

    common = call(client.common_symptoms) or []
    st.markdown("**Common symptoms:**")
    quick_cols = st.columns(6)
    for i, name in enumerate(common):
        if quick_cols[i % 6].button(name, key=f"quick_{name}", use_container_width=True):
            st.session_state.symptom_name = name

    with st.form("symptom_form", clear_on_submit=True):
        c1, c2 = st.columns(2)
        name = c1.text_input(
            "Symptom", key="symptom_name", placeholder="Enter symptom"
        )
        duration = c2.text_input("Duration", placeholder="e.g., 3 days, 2 weeks")
        severity = st.slider("Severity (1-10)", 1, 10, 5)
        st.caption("Mild ← → Severe")
        description = st.text_area(
            "Description (optional)", placeholder="Describe your symptom in detail"
        )

        if st.form_submit_button("➕ Add Symptom"):
            updated = call(
                client.add_symptom, session_id(), name, duration,
                severity=severity, description=description,
            )
            if updated:
                store(updated)
                st.session_state.flash = added_symptom_message(updated)
                st.rerun()

    symptoms = session()["patient_info"]["current_symptoms"]
    if not symptoms:
        st.info("No symptoms added yet.")
    else:
        st.markdown("**Added symptoms:**")
        for s in symptoms:
            c1, c2 = st.columns([5, 1])
            c1.markdown(f"**{s['name']}** · {s['duration']} · severity {s['severity']}/10")
            if s["description"]:
                c1.caption(s["description"])
            if c2.button("🗑️", key=f"remove_{s['id']}"):
                updated = call(client.remove_symptom, session_id(), s["id"])
                if updated:
                    store(updated)
                    st.rerun()

    st.divider()

    if st.button("Continue to Symptom Analysis", type="primary", use_container_width=True):
        updated = call(client.submit_patient, session_id(), history)
        if updated:
            store(updated)
            st.session_state.stage_report = None
            st.rerun()


# ============================================================
# 2. Symptom Analysis
# ============================================================

def render_steps(report: dict) -> None:
    last = report["steps"][-1] if report["steps"] else None
    if last:
        st.progress(last["progress"] / 100, text=last["status"])
    with st.expander("Analysis progress"):
        for step in report["steps"]:
            st.markdown(f"- {step['progress']}% — {step['status']}")


def render_symptom_analysis() -> None:
    st.subheader("🧠 Analyzing Your Symptoms")
    st.caption("Applying medical knowledge to understand your condition")

    report = st.session_state.get("stage_report")
    if report is None:
        with st.spinner("Running LLM Analysis..."):
            report = call(client.run_analysis, session_id())
        if report is None:
            if st.button("🔄 Try again"):
                st.rerun()
            return
        st.session_state.stage_report = report
        store(report["session_state"])

    render_steps(report)
    st.success("Symptom Analysis Complete")

    st.markdown("**Detected Symptoms:**")
    st.markdown(" ".join(f"`{s}`" for s in report["analyzed_symptoms"]))

    if report["medical_history"]:
        st.markdown("**Considering Patient Information:**")
        st.markdown("Medical History: " + ", ".join(report["medical_history"]))

    if st.button("Continue to Knowledge Retrieval", type="primary", use_container_width=True):
        advance()


# ============================================================
# 3. Knowledge Retrieval
# ============================================================

def render_knowledge_retrieval() -> None:
    st.subheader("📚 Medical Knowledge Retrieval")
    st.caption(
        "This would use RAG with medical knowledge bases in a production environment"
    )

    report = st.session_state.get("stage_report")
    if report is None:
        with st.spinner("Connecting to medical knowledge bases..."):
            report = call(client.run_knowledge, session_id())
        if report is None:
            if st.button("🔄 Try again"):
                st.rerun()
            return
        st.session_state.stage_report = report
        store(report["session_state"])

    render_steps(report)
    st.success("Knowledge Retrieval Complete")
    st.info(
        "In a production environment, this would utilize advanced RAG techniques "
        "with PubMed, FHIR databases, and clinical guidelines."
    )

    if st.button("Continue to Specialist Routing", type="primary", use_container_width=True):
        advance()


# ============================================================
# 4. Specialist Routing
# ============================================================

def render_specialist_routing() -> None:
    state = session()
    result = state["diagnosis_result"]

    st.subheader("👨‍⚕️ Specialist Routing")

    if not result:
        st.error("No diagnosis results available. Please go back and try again.")
        return

    recommended = result["recommended_specialist"]
    selected = state["selected_specialist"] or recommended

    st.markdown("### Available Specialists")
    specialists = call(client.specialists) or []
    cols = st.columns(3)
    for i, spec in enumerate(specialists):
        with cols[i % 3]:
            with st.container(border=True):
                title = f"**{spec['name']}**"
                if spec["type"] == recommended:
                    title += " ⭐ Recommended"
                if spec["type"] == selected:
                    title = "✔️ " + title
                st.markdown(title)
                st.caption(spec["description"])
                if st.button("Select", key=f"select_{spec['type']}", use_container_width=True):
                    updated = call(client.select_specialist, session_id(), spec["type"])
                    if updated:
                        store(updated)
                        st.rerun()

    st.markdown("### Specialist Consultation")
    st.markdown(f"**Selected Specialist:** {selected.replace('_', ' ').title()}")

    consultation = state["specialist_consultation"]
    if not consultation:
        if st.button("Consult Specialist", type="primary"):
            with st.spinner("Consulting..."):
                response = call(client.consult, session_id())
            if response:
                store(response["session_state"])
                st.rerun()
    else:
        st.markdown("#### Specialist Assessment")
        st.info(consultation)

        if st.button("Continue to Final Diagnosis", type="primary", use_container_width=True):
            advance()


# ============================================================
# 5. Diagnosis
# ============================================================

def render_final_diagnosis() -> None:
    st.subheader("📝 Diagnosis Summary")

    summary = call(client.summary, session_id())
    if not summary:
        if st.button("Start New Consultation"):
            restart()
        return

    badge = URGENCY_BADGES.get(summary["urgency_level"], "")
    st.markdown(f"## {badge} {summary['urgency_label']}")

    st.markdown("### Possible Conditions")
    for condition in summary["conditions"]:
        st.markdown(f"**{condition['name']}** — {condition['percent']}%")
        st.progress(condition["percent"] / 100)
        st.caption(condition["description"])

    col1, col2 = st.columns(2)
    col1.metric("Confidence Score", f"{summary['confidence_percent']}%")
    col2.metric("Recommended Specialist", summary["specialist_name"])

    if summary["additional_tests"]:
        st.markdown("### Recommended Tests")
        for test in summary["additional_tests"]:
            st.markdown(f"- {test}")

    st.warning(
        "**Important Disclaimer**\n\n"
        "This is a demonstration application. Do not use for actual medical diagnosis. "
        "Always consult with a healthcare professional for medical advice."
    )

    if st.button("Start New Consultation", type="primary", use_container_width=True):
        restart()


# ============================================================
# Навігація
# ============================================================

def advance() -> None:
    updated = call(client.advance, session_id())
    if updated:
        store(updated)
        st.session_state.stage_report = None
        st.rerun()


def restart() -> None:
    updated = call(client.reset, session_id())
    if updated:
        store(updated)
        st.session_state.stage_report = None
        st.rerun()


SCREENS = {
    "patient-input": render_patient_input,
    "symptom-analysis": render_symptom_analysis,
    "knowledge-retrieval": render_knowledge_retrieval,
    "specialist-routing": render_specialist_routing,
    "final-diagnosis": render_final_diagnosis,
}


def main():
    st.set_page_config(
        page_title="MedFlow — Medical Workflow",
        page_icon="🏥",
        layout="wide",
    )

    render_header()

    if not client.is_online():
        st.error("❌ API сервер недоступний!")
        st.info("Запустіть: `python scripts/run_api.py`")
        st.stop()

    ensure_session()
    render_progress()

    SCREENS[session()["current_stage"]]()

    render_footer()


if __name__ == "__main__":
    main()
