"""
Per-tick change log.

A ChangeLog collects the Delta records produced by one engine tick, in the
order creatures were processed. Renderers turn move deltas into animation
and DEATH/BIRTH/ATE into effects; the engine never reads the log back.
"""

from dataclasses import dataclass
from typing import Iterator, List

from .data_types import Action, CellState


@dataclass(frozen=True)
class Delta:
    """
    One change to one creature during a tick.

    Attributes:
        subject: FISH or SHARK
        from_pos: Cell the creature occupied before the change
        to_pos: Cell it occupies after the change
        action: What happened
    """
    subject: CellState
    from_pos: int
    to_pos: int
    action: Action

    def to_dict(self) -> dict:
        return {
            'subject': self.subject.name,
            'from': self.from_pos,
            'to': self.to_pos,
            'action': self.action.name,
        }

    def dump(self):
        """Print the delta on one line"""
        print(f"Animal = {self.subject.name} from {self.from_pos} to {self.to_pos} "
              f"Action={self.action.name}")


class ChangeLog:
    """Append-only sequence of Delta records for a single tick"""

    def __init__(self):
        self._deltas: List[Delta] = []

    def record(self, subject: CellState, from_pos: int, to_pos: int, action: Action) -> Delta:
        """
        Append a delta.

        Returns:
            The recorded Delta
        """
        delta = Delta(subject=subject, from_pos=from_pos, to_pos=to_pos, action=action)
        self._deltas.append(delta)
        return delta

    def of_action(self, action: Action) -> List[Delta]:
        """All deltas with the given action, in log order"""
        return [d for d in self._deltas if d.action == action]

    def count(self, action: Action) -> int:
        return sum(1 for d in self._deltas if d.action == action)

    def to_list(self) -> List[dict]:
        return [d.to_dict() for d in self._deltas]

    def dump(self):
        for delta in self._deltas:
            delta.dump()

    def __iter__(self) -> Iterator[Delta]:
        return iter(self._deltas)

    def __len__(self) -> int:
        return len(self._deltas)

    def __getitem__(self, i: int) -> Delta:
        return self._deltas[i]
