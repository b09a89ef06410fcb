"""Generic helpers for Pydantic models.

- **PydanticPersistence**: Load Pydantic models from TOML and JSON files
- **ObserverManager**: Generic observer pattern implementation
"""

from g13profile.model_manager.observer import ObserverManager
from g13profile.model_manager.persistence import PydanticPersistence

__all__ = [
    "ObserverManager",
    "PydanticPersistence",
]
