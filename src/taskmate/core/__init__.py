"""
Core command handling.

Components:
- parser.py: verb table and task-type parsing (line -> Command)
- commands.py: command actions (Command.run() -> reply text)
- engine.py: parse_line / execute / respond, returning Reply values
- state.py, ports.py: AppState and the TaskRepo port
"""
