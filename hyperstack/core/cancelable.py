"""
Cancelable surface shared by long-running hyperstack commands.
"""

from typing import Optional, Protocol, runtime_checkable


@runtime_checkable
class Cancelable(Protocol):
    """
    A command that may abort itself and report why.

    Hosts check ``is_canceled()`` after running the command and surface
    ``get_cancel_reason()`` to the user instead of treating it as a crash.
    """

    def is_canceled(self) -> bool:
        ...

    def get_cancel_reason(self) -> Optional[str]:
        ...
