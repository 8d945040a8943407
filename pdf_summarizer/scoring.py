from __future__ import annotations
from typing import List, Optional
from .datatypes import Sentence, ScoredSentence, WordFrequencyTable
from .preprocessing import PreprocessConfig, tokenize

# Empirical weights.
FREQUENCY_WEIGHT = 2.0
EDGE_POSITION_SCORE = 2.0   # first or last sentence
INNER_POSITION_SCORE = 1.0
LENGTH_UNIT = 50.0          # characters per point of length bonus
LENGTH_SCORE_CAP = 3.0

def frequency_score(tokens: List[str], table: WordFrequencyTable) -> float:
    return FREQUENCY_WEIGHT * sum(table.get(t, 0) for t in tokens)

def position_score(position: int, n_sentences: int) -> float:
    if position == 0 or position == n_sentences - 1:
        return EDGE_POSITION_SCORE
    return INNER_POSITION_SCORE

def length_score(length: int) -> float:
    return min(length / LENGTH_UNIT, LENGTH_SCORE_CAP)

def score_sentence(sentence: Sentence, n_sentences: int, table: WordFrequencyTable,
                   cfg: Optional[PreprocessConfig] = None) -> ScoredSentence:
    tokens = tokenize(sentence.text, cfg)
    return ScoredSentence(
        sentence=sentence,
        frequency_score=frequency_score(tokens, table),
        position_score=position_score(sentence.position, n_sentences),
        length_score=length_score(sentence.length),
    )

def score_sentences(sentences: List[Sentence], table: WordFrequencyTable,
                    cfg: Optional[PreprocessConfig] = None) -> List[ScoredSentence]:
    """
    Score every sentence independently.

    score = 2 * sum(freq[w] for w in sentence) + (2 if first/last else 1) + min(len / 50, 3)
    """
    n = len(sentences)
    return [score_sentence(s, n, table, cfg) for s in sentences]
