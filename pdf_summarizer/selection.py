from __future__ import annotations
from typing import List
from .datatypes import ScoredSentence, SelectedSet

TARGET_RATIO = 0.5
MIN_SENTENCES = 3

def target_length(text: str, ratio: float = TARGET_RATIO) -> int:
    return int(len(text) * ratio)

def rank_sentences(scored: List[ScoredSentence]) -> List[ScoredSentence]:
    # score descending, original position breaks ties
    return sorted(scored, key=lambda s: (-s.score, s.position))

def select_sentences(scored: List[ScoredSentence], budget: int,
                     min_sentences: int = MIN_SENTENCES) -> SelectedSet:
    """
    Greedy selection under a character budget.

    Candidates are visited best-first and accepted while the running length stays
    within `budget`. If that leaves fewer than `min_sentences` (or all of them, for
    shorter documents), the best rejected candidates are added regardless of the
    budget. The returned set is ordered by original position.
    """
    ranked = rank_sentences(scored)
    selected = SelectedSet(target_length=budget)
    rejected: List[ScoredSentence] = []
    for item in ranked:
        if selected.fits(item):
            selected.add(item)
        else:
            rejected.append(item)

    floor = min(min_sentences, len(ranked))
    for item in rejected:
        if len(selected.sentences) >= floor:
            break
        selected.add(item)

    selected.sentences.sort(key=lambda s: s.position)
    return selected
