from __future__ import annotations

from abc import ABC, abstractmethod


class AsyncModule(ABC):
    """A long-running unit started by the CLI.

    ``run`` drives the stages in order; ``teardown`` runs whether or not the
    earlier stages succeed, and ``execute`` returns the process exit code.
    """

    async def initialize(self) -> None:
        return None

    async def validate(self) -> None:
        return None

    @abstractmethod
    async def execute(self) -> int: ...

    async def teardown(self) -> None:
        return None

    async def run(self) -> int:
        try:
            await self.initialize()
            await self.validate()
            return await self.execute()
        finally:
            await self.teardown()
