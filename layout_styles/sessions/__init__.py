"""Style sessions."""
from layout_styles.sessions.manager import StyleSession

__all__ = ["StyleSession"]
