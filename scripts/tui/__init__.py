"""
Pomodoro To-Do TUI - Terminal User Interface for tasks and focus timers.

Architecture:
- providers.py: Protocols (task repository, timer scheduler) + view snapshots
- state_provider.py: File-backed task repository
- session.py: Key routing, new-task wizard, status messages
- views/: Textual screen/widget components
- app.py: Main application entry point

Extensibility points:
1. New timer policies: Implement the TimerScheduler protocol
2. New data sources: Implement the TaskRepository protocol
3. New widgets: Create composable widgets in views/widgets.py
"""
