from typing import Iterator

from app.models import Role, Turn


class Transcript:
    """
    Append-only conversation log for one session.
    What gets rendered and what gets sent to the generation service both come from here.
    """

    def __init__(self):
        self._turns: list[Turn] = []

    def append(self, turn: Turn) -> None:
        self._turns.append(turn)

    def as_service_request(self) -> list[dict]:
        # role mapping (assistant -> model etc.) is done by the provider
        return [{"role": t.role.value, "content": t.content} for t in self._turns]

    def visible_turns(self) -> list[Turn]:
        return [t for t in self._turns if t.role is not Role.SYSTEM]

    def __len__(self) -> int:
        return len(self._turns)

    def __iter__(self) -> Iterator[Turn]:
        return iter(list(self._turns))
