from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Dict, Tuple

@dataclass(frozen=True)
class Sentence:
    idx: int
    text: str
    tokens: Tuple[str, ...] = ()

@dataclass
class Document:
    raw_text: str
    sentences: List[Sentence] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.sentences)

@dataclass
class Edge:
    i: int
    j: int
    weight: float  # cosine similarity

@dataclass
class Graph:
    nodes: List[Sentence]
    edges: List[Edge]  # undirected weighted edges

TermVector = Dict[str, float]  # sparse: absent terms weigh 0
ScoreVector = List[float]
TagList = List[str]
