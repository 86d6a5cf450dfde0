"""
Reference Data Interfaces (Ports).

Read-only providers of the exercises and tools an editor can choose from.
They are polled once each time an editor is mounted.
"""
from typing import List, Protocol

from domain.models import ExerciseRef, ToolRef


class ExerciseCatalog(Protocol):
    """Source of exercises that can fill a workout slot."""

    async def list_exercises(self) -> List[ExerciseRef]:
        """
        List all exercises.

        Returns:
            Exercises as {id, title}

        Raises:
            RecordStoreError: If the catalog cannot be read
        """
        ...


class ToolCatalog(Protocol):
    """Source of tools a workout can require."""

    async def list_tools(self) -> List[ToolRef]:
        """
        List all tools.

        Returns:
            Tools as {id, name}

        Raises:
            RecordStoreError: If the catalog cannot be read
        """
        ...
