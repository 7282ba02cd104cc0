# Services package init
"""
To-Do List Backend — Services Layer
=====================================

Service Inventory:
    - TaskService: insert, list and idempotent delete over the tasks table
"""
