from dataclasses import dataclass, field
from typing import Dict, List


@dataclass
class Verdict:
    """Outcome of the majority vote over the collected clues."""
    tallies: Dict[str, int] = field(default_factory=dict)  # candidate order
    leaders: List[str] = field(default_factory=list)
    top_tally: int = 0

    @property
    def culprit(self):
        """The single most-implicated suspect; None on a tie or when no clue implicates anyone."""
        return self.leaders[0] if len(self.leaders) == 1 else None

    @property
    def is_tie(self):
        return len(self.leaders) > 1


def tally(ledger, directory, candidates):
    """Clue count per candidate, keeping the candidate order."""
    return {name: ledger.count_for(name, directory) for name in candidates}


def reach_verdict(ledger, directory, candidates):
    """
    Every candidate sharing the highest tally is a leader, listed in candidate order.
    A top tally of zero implicates nobody.
    """
    tallies = tally(ledger, directory, candidates)
    top = max(tallies.values(), default=0)
    leaders = [name for name, count in tallies.items() if count == top] if top > 0 else []
    return Verdict(tallies=tallies, leaders=leaders, top_tally=top)


def judge_accusation(ledger, directory, suspect_name, threshold=2):
    """
    An accusation stands when at least `threshold` collected clues point to the accused.
    """
    supporting = [text for text in ledger if directory.lookup(text) == suspect_name]
    sustained = len(supporting) >= threshold
    return {
        "event_type": "accusation",
        "data": {
            "suspect": suspect_name,
            "supporting_clues": supporting,
            "threshold": threshold,
            "outcome": "SUSTAINED" if sustained else "NOT_SUSTAINED",
        },
    }
