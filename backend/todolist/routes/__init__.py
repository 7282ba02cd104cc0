# Routes package init
"""
To-Do List Backend — API Routes Package
=========================================

Route Inventory:
    - tasks.py:   GET    /tasks             (list every task)
                  POST   /tasks             (create a task)
                  DELETE /tasks/{task_id}   (idempotent delete)
    - health.py:  GET    /health            (service health check)

Routes are thin: they extract request data, call TaskService, and shape
the response. Store logic lives in services/task_service.py.
"""
