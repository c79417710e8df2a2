"""
MedFlow — Web UI Module

Streamlit майстер для воркфлоу медичної діагностики.

Запуск:
    streamlit run medflow/web_ui/app.py

    або:

    python scripts/run_web.py

Етапи:
    1. Patient Info — дані пацієнта та симптоми
    2. Symptom Analysis — аналіз симптомів
    3. Knowledge Retrieval — пошук по базах знань
    4. Specialist Routing — вибір спеціаліста
    5. Diagnosis — результат

Вимоги:
    - Streamlit >= 1.32
    - Requests
    - API сервер (python scripts/run_api.py)
"""
