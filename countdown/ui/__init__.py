# countdown/ui/__init__.py
# Rich presentation of countdown engine state

from .countdown_view import CountdownView

__all__ = ["CountdownView"]
