"""
MedFlow — REST API модуль

FastAPI REST API для воркфлоу медичної діагностики.

Компоненти:
- app.py: FastAPI application
- routes/: API endpoints
- models.py: Pydantic models
- dependencies.py: Сесії та AI-сервіс
- config.py: Налаштування сервера

Запуск:
    uvicorn medflow.api.app:app --reload --port 8000

Або:
    python scripts/run_api.py

Документація:
    http://localhost:8000/docs (Swagger UI)
    http://localhost:8000/redoc (ReDoc)

Endpoints:
    GET    /                                   - Root info
    GET    /health                             - Health check

    GET    /api/specialists                    - Довідник спеціалістів
    GET    /api/specialists/{type}             - Один спеціаліст
    GET    /api/symptoms/common                - Швидкий вибір симптомів
    POST   /api/diagnose                       - Матчинг за списком симптомів

    POST   /api/sessions                       - Нова сесія
    GET    /api/sessions                       - Активні сесії
    GET    /api/sessions/{id}                  - Стан сесії
    DELETE /api/sessions/{id}                  - Видалити сесію
    PATCH  /api/sessions/{id}/patient          - Оновити дані пацієнта
    POST   /api/sessions/{id}/symptoms         - Додати симптом
    DELETE /api/sessions/{id}/symptoms/{sid}   - Видалити симптом
    POST   /api/sessions/{id}/patient/submit   - Завершити форму
    POST   /api/sessions/{id}/analysis         - Аналіз симптомів
    POST   /api/sessions/{id}/knowledge        - Пошук знань
    POST   /api/sessions/{id}/specialist/select  - Обрати спеціаліста
    POST   /api/sessions/{id}/specialist/consult - Консультація
    POST   /api/sessions/{id}/advance          - Наступний етап
    GET    /api/sessions/{id}/summary          - Фінальний діагноз
    POST   /api/sessions/{id}/reset            - Почати заново
"""
