"""gitpick - fzf pickers over everyday git operations."""
