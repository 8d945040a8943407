from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Dict

@dataclass(frozen=True)
class Sentence:
    position: int
    text: str      # trimmed
    length: int    # length of the untrimmed piece as split

@dataclass
class ScoredSentence:
    sentence: Sentence
    frequency_score: float = 0.0
    position_score: float = 0.0
    length_score: float = 0.0

    @property
    def score(self) -> float:
        return self.frequency_score + self.position_score + self.length_score

    @property
    def position(self) -> int:
        return self.sentence.position

    @property
    def length(self) -> int:
        return self.sentence.length

    @property
    def text(self) -> str:
        return self.sentence.text

@dataclass
class SelectedSet:
    target_length: int
    sentences: List[ScoredSentence] = field(default_factory=list)
    current_length: int = 0

    def fits(self, item: ScoredSentence) -> bool:
        return self.current_length + item.length <= self.target_length

    def add(self, item: ScoredSentence) -> None:
        self.sentences.append(item)
        self.current_length += item.length

    def positions(self) -> List[int]:
        return [s.position for s in self.sentences]

@dataclass
class Paragraph:
    sentences: List[str] = field(default_factory=list)

    def render(self) -> str:
        return " ".join(self.sentences)

WordFrequencyTable = Dict[str, int]  # lowercase token -> count, stop words excluded
