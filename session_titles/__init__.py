"""Session Titles — short display titles for chats and schedules derived from raw prompts.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
