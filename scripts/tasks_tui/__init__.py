"""
Daily Task Manager TUI - single-screen to-do list.

Architecture:
- providers.py: storage protocols and errors
- store_provider.py: key-value stores and the task persistence gateway
- views/: Textual screen, widgets and the confirmation dialog
- app.py: Main application entry point

State transitions live in task_state.py and are pure; the screen applies
them and performs the writes.
"""
