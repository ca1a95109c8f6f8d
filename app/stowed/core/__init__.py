"""Core linking logic for stowed.

Resolution of packages into link actions, the link state machine,
and the orchestration, configuration and theming around them.
"""
